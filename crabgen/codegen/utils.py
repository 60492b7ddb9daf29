import re
import unicodedata

__all__ = ('split_words', 'to_camel_case', 'to_snake_case')

_WORD = re.compile(r'[A-Z]+(?=[A-Z][a-z])|[A-Z]?[a-z0-9]+|[A-Z]+|[0-9]+')


def remove_accents(input_str):
    nfkd_form = unicodedata.normalize('NFKD', input_str)
    return ''.join(c for c in nfkd_form if not unicodedata.combining(c))


def split_words(name: str) -> list[str]:
    """Split an identifier into its words.

    Word boundaries are separators (anything that is not a letter or digit),
    lower-to-upper transitions and the end of an acronym:

        >>> split_words('petId')
        ['pet', 'Id']
        >>> split_words('HTTPRequest-body')
        ['HTTP', 'Request', 'body']
    """
    return _WORD.findall(remove_accents(name))


def to_snake_case(name: str) -> str:
    """Convert a name to ``snake_case`` (``addPet`` -> ``add_pet``)."""
    return '_'.join(word.lower() for word in split_words(name))


def to_camel_case(name: str) -> str:
    """Convert a name to upper ``CamelCase`` (``pet_id`` -> ``PetId``)."""
    return ''.join(word[0].upper() + word[1:].lower() for word in split_words(name))
