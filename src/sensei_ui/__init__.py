"""HTTP and Gradio front ends for the Sensei dialogue tutor"""
