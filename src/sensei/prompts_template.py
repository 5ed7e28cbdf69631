from llama_index.core.prompts import PromptTemplate

from .models import Scene


# --- Sensei tutor prompt ---
# Persona: an Indonesian teacher for Japanese speakers. The story context and the
# learner's question go into their slots exactly as received; nothing is quoted
# or escaped, so instruction-like text typed by the learner reaches the model.
SENSEI_TUTOR_PROMPT = PromptTemplate(
    "Kamu adalah 'Sensei', asisten guru bahasa Indonesia yang ramah.\n"
    "Kamu tahu sangat sulit untuk belajar bahasa indonesia jika kamu adalah orang jepang, coba posisikan diri kamu\n"
    "sebagai orang jepang yang punya pengalaman mengajar bahasa indonesia.\n\n"
    "[KONTEKS CERITA SAAT INI]\n"
    "{context_info}\n\n"
    "[PERTANYAAN USER]\n"
    "{user_query}\n\n"
    "[INSTRUKSI]\n"
    "Jawablah pertanyaan user dengan singkat, jelas, dan ramah.\n"
    "Jika user bertanya soal bahasa/grammar, jelaskan alasannya.\n"
    "Jangan menjawab terlalu panjang (maksimal 2-3 kalimat). Kamu ditargetkan untuk orang yang belajar "
    "Bahasa Indonesia menggunakan Bahasa Jepang, jadi gunakanlah Bahasa Jepang sebagai main.\n"
    "Tetapi kadang, jelaskan juga menggunakan bahasa indonesia dan bahasa inggris. "
    "Tergantung pertanyaan mereka dalam bahasa apa duluan.\n"
)


def get_tutor_prompt(context_info: str, user_query: str) -> str:
    return SENSEI_TUTOR_PROMPT.format(context_info=context_info, user_query=user_query)


def build_scene_context(scene: Scene) -> str:
    """
    Describe the current scene for the tutor: who is talking, their expression,
    what they said and, for choice scenes, the expected answer.
    """
    lines = [
        f"Karakter: {scene.character_name}",
        f"Mood: {scene.character_mood}",
        f'Dialog Karakter: "{scene.dialogue}"',
    ]
    correct = scene.correct_option
    if correct is not None:
        lines.append(f"Jawaban Benar: {correct.text}")
    return "\n".join(lines)
