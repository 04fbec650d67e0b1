"""User-facing messages and static help payloads.

The proxy serves an Arabic-speaking audience, so every message returned to
callers is kept here in one place.
"""

from typing import Any

NO_RESPONSE_SENTINEL = "No response received"

STREAM_FAILURE_MESSAGE = "❌ حدث خطأ أثناء الاتصال بخدمة المحادثة، حاول مرة أخرى لاحقاً."

MISSING_OPENAI_KEY = "❌ مفتاح OpenAI غير موجود. اضبط OPENAI_API_KEY في البيئة."
UNKNOWN_SERVICE = "❌ خدمة غير معروفة!"

MISSING_CHAT_QUERY = "⚠️ يرجى كتابة نص للمحادثة!"
MISSING_IMAGE_PROMPT = "⚠️ يرجى كتابة وصف للصورة!"
MISSING_SUMMARY_TEXT = "⚠️ يرجى إدخال نص للتلخيص!"
MISSING_TRANSLATION_TEXT = "⚠️ يرجى إدخال نص للترجمة!"
MISSING_SENTIMENT_TEXT = "⚠️ يرجى إدخال نص لتحليل المشاعر!"
MISSING_CREATIVE_PROMPT = "⚠️ يرجى كتابة سؤال أو فكرة!"
MISSING_COMPARE_QUERY = "⚠️ يرجى كتابة سؤال للمقارنة!"

ASSISTANT_SYSTEM_PROMPT = "أنت مساعد ذكي يتحدث العربية بطلاقة. أجب بطريقة مفيدة ودقيقة."


def service_error(service: str) -> str:
    """Message shown when a provider call fails."""
    return f"حدث خطأ في خدمة {service}"


CONVERSATION_HELP: dict[str, Any] = {
    "status": True,
    "creator": "Dark-Team",
    "message": "📌 أرسل بـ ?q=",
}

SERVICES_HELP: dict[str, Any] = {
    "status": True,
    "creator": "AI Services API",
    "message": "📌 اختر خدمة من القائمة:",
    "available_services": [
        {"name": "chat", "endpoint": "/?service=chat&query=نصك"},
        {"name": "image", "endpoint": "/?service=image&query=وصف الصورة"},
        {"name": "summarize", "endpoint": "/?service=summarize&query=النص"},
        {"name": "translate", "endpoint": "/?service=translate&text=النص&target=en"},
        {"name": "sentiment", "endpoint": "/?service=sentiment&text=النص"},
        {"name": "creative", "endpoint": "/?service=creative&query=الفكرة&type=story"},
        {"name": "compare", "endpoint": "/?service=compare&query=السؤال&models=gpt-3.5,gpt-4"},
    ],
    "examples": {
        "chat": "/api/ai?service=chat&query=مرحبا، كيف حالك؟",
        "image": "/api/ai?service=image&query=منظر طبيعي لغروب الشمس",
        "summarize": "/api/ai?service=summarize&query=نص طويل للتلخيص...",
    },
}

SERVICES_CATALOG: dict[str, Any] = {
    "status": True,
    "services": [
        {
            "name": "Chat with AI",
            "description": "محادثة مع الذكاء الاصطناعي",
            "endpoint": "/api/ai/chat?query=نصك",
            "parameters": ["query", "model", "temperature"],
        },
        {
            "name": "Generate Images",
            "description": "توليد صور باستخدام الذكاء الاصطناعي",
            "endpoint": "/api/ai/image?query=وصف الصورة",
            "parameters": ["query", "size", "n"],
        },
        {
            "name": "Text Summarization",
            "description": "تلخيص النصوص الطويلة",
            "endpoint": "/api/ai/summarize?text=النص",
            "parameters": ["text", "useOpenAI"],
        },
        {
            "name": "Translation",
            "description": "ترجمة النصوص بين اللغات",
            "endpoint": "/api/ai/translate?text=مرحبا&target=en&source=ar",
            "parameters": ["text", "target", "source"],
        },
        {
            "name": "Sentiment Analysis",
            "description": "تحليل المشاعر في النصوص",
            "endpoint": "/api/ai/sentiment?text=أنا سعيد جدا",
            "parameters": ["text"],
        },
        {
            "name": "Creative Writing",
            "description": "توليد نصوص إبداعية (قصص، شعر، مقالات)",
            "endpoint": "/api/ai/creative?prompt=فكرة القصة&type=story",
            "parameters": ["prompt", "type", "length"],
        },
        {
            "name": "AI Model Comparison",
            "description": "مقارنة ردود نماذج الذكاء الاصطناعي المختلفة",
            "endpoint": "/api/ai/compare?query=سؤال&models=gpt-3.5,gpt-4",
            "parameters": ["query", "models"],
        },
    ],
    "environment_variables": [
        "OPENAI_API_KEY (مطلوب لخدمات OpenAI)",
        "HUGGINGFACE_API_KEY (اختياري للخدمات المجانية)",
    ],
    "examples": [
        "Chat: /api/ai/chat?query=اشرح نظرية النسبية",
        "Image: /api/ai/image?query=قطة تلعب بالكرة&size=512x512",
        "Translate: /api/ai/translate?text=مرحبا بالعالم&target=en",
    ],
}
