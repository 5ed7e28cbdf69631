#!/usr/bin/env python3
"""
Sensei Dialogue Tutor - Main Entry Point

A scripted Indonesian conversation lesson for Japanese speakers: Sari asks,
the learner answers by choice or free text, and Sensei (Gemini) answers
open questions along the way.
"""

import sys
import os

# Add src to Python path
project_root = os.path.dirname(os.path.abspath(__file__))
src_path = os.path.join(project_root, 'src')
sys.path.insert(0, src_path)

def main():
    """Main entry point for the Sensei Dialogue Tutor"""
    try:
        from sensei_ui.api import main as api_main
        api_main()
    except KeyboardInterrupt:
        print("\n👋 Sampai jumpa! Thanks for practicing with Sari!")
    except Exception as e:
        print(f"❌ Error starting application: {e}")
        print("📝 Please check your environment setup and try again.")
        sys.exit(1)

if __name__ == "__main__":
    main()
