# description/checker.py

from description.errors import InvalidInputSymbolError


def find_invalid_symbol(input_alphabet, word):
    """Return the index of the first character of word outside input_alphabet, or None."""
    for index, ch in enumerate(word):
        if ch not in input_alphabet:
            return index
    return None


def check_input(input_alphabet, word):
    index = find_invalid_symbol(input_alphabet, word)
    if index is not None:
        raise InvalidInputSymbolError(index, word[index])
