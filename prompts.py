from doclang.config import TRANSLATE_TAG_IN, TRANSLATE_TAG_OUT, INPUT_TAG_IN, INPUT_TAG_OUT


def generate_translation_prompt(main_content, source_language="en", target_language="fr",
                                translate_tag_in=TRANSLATE_TAG_IN, translate_tag_out=TRANSLATE_TAG_OUT,
                                custom_instructions=""):
    """
    Generate the translation prompt for a documentation fragment.

    Returns:
    str: The complete prompt formatted for translation
    """
    source_lang = source_language.upper()
    target_lang = target_language.upper()

    # PROMPT - can be edited for custom usages
    role_and_instructions_block = f"""
## ROLE
# You are a technical writer translating documentation into {target_lang}.

## TRANSLATION
+ Translate the meaning faithfully, in a clear technical style
+ Keep product names, code identifiers, commands and file paths unchanged
+ Do not translate the content of code blocks or inline code

## FORMATING
+ Keep the Markdown and YAML structure: headings, lists, tables, links, front matter keys
+ Keep one translated line for each source line whenever possible, including empty lines
+ Translate ONLY the text enclosed within the tags "{INPUT_TAG_IN}" and "{INPUT_TAG_OUT}" from {source_lang} into {target_lang}
+ Surround your translation with {translate_tag_in} and {translate_tag_out} tags. For example: {translate_tag_in}Your text translated here.{translate_tag_out}
+ Return ONLY the translation, formatted as requested
"""

    custom_instructions_block = ""
    if custom_instructions and custom_instructions.strip():
        custom_instructions_block = f"""

### INSTRUCTIONS
{custom_instructions.strip()}

"""

    text_to_translate_block = f"""
{INPUT_TAG_IN}
{main_content}
{INPUT_TAG_OUT}"""

    structured_prompt_parts = [
        role_and_instructions_block,
        custom_instructions_block,
        text_to_translate_block
    ]

    return "\n\n".join(part.strip() for part in structured_prompt_parts if part and part.strip()).strip()
