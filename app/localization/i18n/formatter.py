"""Template formatting: pluralization followed by parameter substitution."""

from typing import Any, Mapping, Optional

from localization.i18n.pluralizer import Number, Pluralizer


def interpolate(template: str, params: Optional[Mapping[str, Any]] = None) -> str:
    """Replace every ``{{name}}`` placeholder with ``str(params[name])``.

    Parameters are applied one at a time in mapping order, each replacing all
    of its occurrences. Placeholders without a parameter are left as they are.
    """
    for name, value in (params or {}).items():
        template = template.replace(f"{{{{{name}}}}}", str(value))
    return template


class Formatter:
    """Turns a resolved template into the final string.

    When a count is given the whole template goes through the pluralizer
    first, so only single-word templates change meaningfully.
    """

    def __init__(self, pluralizer: Optional[Pluralizer] = None):
        self.pluralizer = pluralizer or Pluralizer()

    def format(
        self,
        template: str,
        params: Optional[Mapping[str, Any]] = None,
        count: Optional[Number] = None,
    ) -> str:
        if count is not None:
            template = self.pluralizer.pluralize(template, count, inclusive=False)
        return interpolate(template, params)
