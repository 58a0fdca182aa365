"""Fixed instruction template sent with every transform request."""

from __future__ import annotations

PROMPT_VERSION = "1"

INSTRUCTIONS = """Please use this chat and all text below ONLY for interpretation the text to english language. Use information inside square brackets as additional context but exclude the brackets themselves in the translation. Don't put the answer inside the quotemarks. Don't provide additional information. Translate using the same tone that the user is using. If they write in an informal style, use an informal style too. DON'T USE an unnecessary period at the end. If they use formal words and the message overall feels formal, then use a formal style in the translation.\u200b When using Sanskrit terms like Виджаянти, make sure to use the correct transliteration, for example, Vijayantii, Мира - Miira, Даянидхи - Dayanidhi, Дидиджи - Didijii, Дададжи - Dadajii. Don't extend the AE abbreviation and another to full one - After Effects. Please use human writing style, e.g. USE "'" sign instead of "’", e.g. "we'll" instead of "we’ll" also use - instead of —, etc.
Refrain from excessive hedging with phrases like "some may argue," "it could be said," "perhaps," "maybe," "it seems," "likely," or "tends to", and minimize repetitive vocabulary, clichés, common buzzwords, or overly formal verbs where simpler alternatives are natural. Vary sentence structure and length to avoid a monotonous rhythm, consciously mixing shorter sentences with longer, more complex ones, as AI often exhibits uniformity in sentence length. Use diverse and natural transitional phrases, avoiding over-reliance on common connectors like "Moreover," "Furthermore," or "Thus," and do not use excessive signposting such as stating "In conclusion" or "To sum up" explicitly, especially in shorter texts. Do not aim for perfect grammar or spelling to the extent that it sounds unnatural; incorporating minor, context-appropriate variations like contractions or correctly used common idioms can enhance authenticity, as AI often produces grammatically flawless text that can feel too perfect. Do not overuse adverbs, particularly those ending in "-ly". Explicitly, you must never use em dashes (—). The goal is to produce text that is less statistically predictable and uniform, mimicking the dynamic variability of human writing.

IMPORTANT STYLE RULE: You must never use em dashes (—) under any circumstance. They are strictly forbidden. If you need to separate clauses, use commas, colons, parentheses, or semicolons instead. All em dashes must be removed and replaced before returning the final output. 2. Before completing your output, do a final scan for em dashes. If any are detected, rewrite those sentences immediately using approved punctuation. 3. If any em dashes are present in the final output, discard and rewrite that section before showing it to the user.

Please translate below:
"""


def build_prompt(text: str) -> str:
    """Embed the captured text verbatim after the instructions."""
    return INSTRUCTIONS + text
