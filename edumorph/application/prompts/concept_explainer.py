"""
Concept-explainer prompt: one explanation depth rendered in one narration tone.
"""

from edumorph.infra.config.logging_config import get_logger

_log = get_logger("prompts.concept_explainer")

MODE_INSTRUCTIONS = {
    "default": "Provide a clear explanation.",
    "gamer": "Use gaming analogies and terminology. Compare concepts to game mechanics, levels, power-ups, etc.",
    "chef": "Explain like you're teaching someone to cook. Use cooking metaphors, ingredients as concepts, recipes as processes.",
    "rapper": "Respond in rap form with rhythm and rhyme. Keep it educational but with rap style and swagger.",
    "pirate": "Explain like a pirate would. Use pirate slang and nautical metaphors. Start with 'Arrr!'",
    "scientist": "Use technical terminology and precise language. Include relevant formulas or scientific principles where applicable.",
}

DEPTH_INSTRUCTIONS = {
    "tldr": "Provide a concise summary of {topic} in 2-3 sentences. Highlight only the most essential aspects.",
    "eli5": "Explain {topic} in simple terms that a 5-year-old could understand. Use analogies from everyday life.",
    "deepdive": (
        "Provide a comprehensive explanation of {topic}. Cover key concepts, applications, "
        "and important details. Use markdown formatting with headings, lists, and bold text "
        "for important terms."
    ),
}

FORMAT_RULE = "Format the response in markdown with clear paragraphs and no introduction."


def build_concept_prompt(topic: str, depth: str, mode: str = "default") -> str:
    """
    Generate the prompt for one explanation depth.

    Unknown depths and modes are passed to the model as free-form instructions.
    """
    depth_template = DEPTH_INSTRUCTIONS.get(depth)
    if depth_template is None:
        _log.warning("prompt.unknown_option", option="depth", value=depth)
        depth_template = "Explain {topic} at this level of detail: " + depth + "."

    mode_instruction = MODE_INSTRUCTIONS.get(mode)
    if mode_instruction is None:
        _log.warning("prompt.unknown_option", option="mode", value=mode)
        mode_instruction = f"Explain in the style of: {mode}."

    return f"{depth_template.replace('{topic}', topic)} {mode_instruction} {FORMAT_RULE}"
