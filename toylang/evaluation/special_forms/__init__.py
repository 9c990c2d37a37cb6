"""Registry of special forms for the toylang evaluator.

Maps Symbols to handler functions that implement non-standard evaluation
rules. The evaluator consults this table before ordinary function
application.
"""

from toylang.types.symbol import Symbol
from toylang.evaluation.special_forms.let_form import let_form

SPECIAL_FORMS = {
    Symbol("let"): let_form,
}
