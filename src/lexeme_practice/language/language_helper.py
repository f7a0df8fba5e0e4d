import pycountry


def get_language_name_in_english(language_code: str) -> str:
    """Get the English name of a language given its ISO 639-1 or 639-3 code"""
    code = language_code.strip().lower()
    if len(code) == 2:
        lang = pycountry.languages.get(alpha_2=code)
    else:
        lang = pycountry.languages.get(alpha_3=code)
    if lang:
        return lang.name
    raise KeyError(f"Unknown language code: {language_code}")
