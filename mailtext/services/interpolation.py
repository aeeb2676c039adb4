"""
%{name} placeholder handling for translation strings
"""
import re
from typing import Any, Dict, Iterable, Set, Union

INTERPOLATION_PATTERN = re.compile(r"%\{([A-Za-z0-9_]+)\}")


def find_keys(text: Union[str, Dict[str, str], None]) -> Set[str]:
    """Placeholder names used in a string or in every form of a plural mapping"""
    if not text:
        return set()
    if isinstance(text, dict):
        keys: Set[str] = set()
        for form in text.values():
            keys |= find_keys(form)
        return keys
    return set(INTERPOLATION_PATTERN.findall(text))


def invalid_keys(original: Union[str, Dict[str, str]], candidate: str) -> Set[str]:
    """
    Placeholders that make candidate unusable in place of original.

    The candidate must use exactly the placeholders of the original;
    anything missing from it or not known to the original is reported.

    Returns:
        Symmetric difference of the two placeholder sets (empty when valid)
    """
    return find_keys(original) ^ find_keys(candidate)


def format_keys(keys: Iterable[str]) -> str:
    return ", ".join(sorted(keys))


def interpolate(text: str, variables: Dict[str, Any]) -> str:
    """Replace known %{name} placeholders, leaving unknown ones as they are"""
    def replace(match):
        name = match.group(1)
        if name in variables:
            return str(variables[name])
        return match.group(0)

    return INTERPOLATION_PATTERN.sub(replace, text)
