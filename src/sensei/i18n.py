"""
Centralized Text Resources for Internationalization (i18n)

This file contains the strings used by the Gradio lesson player.

supported languages:
- English (default)
- Bahasa Indonesia
- 日本語
"""

UI_TEXTS = {
    "en": {
        "language_name": "English",
        "app_title": "Sensei - Learn Indonesian with Sari",
        "app_header": "Answer Sari's questions. Stuck? Ask Sensei.",
        "language_label": "Language",

        # Home
        "streak_label": "🔥 Streak: {days} days",
        "xp_label": "💎 XP: {xp}",
        "lesson_picker_label": "Lesson",
        "start_lesson_btn": "Start Lesson",

        # Lesson
        "choice_label": "Choose your answer",
        "text_answer_label": "Type your answer",
        "text_answer_placeholder": "Ketik jawabanmu di sini...",
        "submit_btn": "Answer",
        "continue_btn": "Continue",
        "retry_btn": "Try Again",
        "lesson_complete": "🎉 Lesson Complete!",
        "no_lesson_loaded": "Start a lesson first.",
        "pick_an_option": "Pick one of the options first.",
        "empty_answer": "Type an answer first.",

        # Tutor
        "tutor_header": "Ask Sensei",
        "tutor_input_label": "Your question",
        "tutor_input_placeholder": "e.g. Kenapa pakai 'saya' bukan 'aku'?",
        "tutor_send_btn": "Send",
    },
    "id": {
        "language_name": "Bahasa Indonesia",
        "app_title": "Sensei - Belajar Bahasa Indonesia bersama Sari",
        "app_header": "Jawab pertanyaan Sari. Bingung? Tanya Sensei.",
        "language_label": "Bahasa",

        "streak_label": "🔥 Streak: {days} hari",
        "xp_label": "💎 XP: {xp}",
        "lesson_picker_label": "Pelajaran",
        "start_lesson_btn": "Mulai Pelajaran",

        "choice_label": "Pilih jawabanmu",
        "text_answer_label": "Ketik jawabanmu",
        "text_answer_placeholder": "Ketik jawabanmu di sini...",
        "submit_btn": "Jawab",
        "continue_btn": "Lanjut",
        "retry_btn": "Coba Lagi",
        "lesson_complete": "🎉 Pelajaran Selesai!",
        "no_lesson_loaded": "Mulai pelajaran dulu ya.",
        "pick_an_option": "Pilih salah satu jawaban dulu.",
        "empty_answer": "Ketik jawaban dulu.",

        "tutor_header": "Tanya Sensei",
        "tutor_input_label": "Pertanyaanmu",
        "tutor_input_placeholder": "Contoh: Kenapa pakai 'saya' bukan 'aku'?",
        "tutor_send_btn": "Kirim",
    },
    "ja": {
        "language_name": "日本語",
        "app_title": "先生 - サリとインドネシア語を学ぼう",
        "app_header": "サリの質問に答えてください。困ったら先生に聞いてみましょう。",
        "language_label": "言語",

        "streak_label": "🔥 連続: {days}日",
        "xp_label": "💎 XP: {xp}",
        "lesson_picker_label": "レッスン",
        "start_lesson_btn": "レッスン開始",

        "choice_label": "答えを選んでください",
        "text_answer_label": "答えを入力してください",
        "text_answer_placeholder": "Ketik jawabanmu di sini...",
        "submit_btn": "回答",
        "continue_btn": "次へ",
        "retry_btn": "もう一度",
        "lesson_complete": "🎉 レッスン完了！",
        "no_lesson_loaded": "まずレッスンを始めてください。",
        "pick_an_option": "まず選択肢を選んでください。",
        "empty_answer": "まず答えを入力してください。",

        "tutor_header": "先生に質問",
        "tutor_input_label": "質問",
        "tutor_input_placeholder": "例: なぜ「aku」ではなく「saya」を使うの？",
        "tutor_send_btn": "送信",
    },
}

SUPPORTED_LANGUAGES = {code: texts["language_name"] for code, texts in UI_TEXTS.items()}


def get_ui_text(key: str, lang: str = "en") -> str:
    """
    Get UI text for the specified key and language.

    Args:
        key (str): The key for the UI text.
        lang (str): The language code (default is "en").

    Returns:
        str: The localized UI text.
    """
    return UI_TEXTS.get(lang, UI_TEXTS["en"]).get(key, UI_TEXTS["en"].get(key, f"<{key}_NOT_FOUND>"))
