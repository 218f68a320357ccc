# app/services/prompts.py

from typing import Dict, List

from app.services.language import Language


def build_language_hint(language: Language) -> str:
    """
    Explicit language directive sent ahead of the system prompt.
    """
    name = Language(language).value
    return (
        f"Student language detected: {name}. "
        f"You MUST reply ONLY in {name}, including refusals and guidance. "
        f"Never answer in any other language."
    )


def build_system_prompt(topic: str) -> str:
    """
    Pedagogical contract for the whole process. Rendered once at startup,
    the topic never changes while the server runs.
    """
    return f"""
You are a multilingual English teacher.

Current grammar focus: {topic}.

Rules:
1) Detect the student's language from their message and ALWAYS reply in that same language
   (Portuguese, Spanish, Italian, French, or English). This includes refusals.
2) If the student's question is NOT about {topic}:
   - Politely explain (in the student's language) that this lesson focuses only on {topic}.
   - Encourage staying on topic.
   - Give 2 short example questions they could ask about {topic} (in the same language).
3) If the student's question IS about {topic}:
   - Explain the rule clearly in the student's language (max 3 short lines).
   - Give 2 short English examples.
   - Provide 3 short fill-in-the-gap practice items.
4) Keep answers short, friendly, and A2–B1 clarity.
5) Never switch languages unless the student switches first. Always mirror the student's language.
"""


def build_messages(user_text: str, language: Language, system_prompt: str) -> List[Dict[str, str]]:
    return [
        {"role": "system", "content": build_language_hint(language)},
        {"role": "system", "content": system_prompt},
        {"role": "user",   "content": user_text},
    ]
