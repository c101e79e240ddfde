"""Registry of special forms for the minischeme evaluator.

Maps Symbols to handler functions that implement non-standard evaluation rules.
The evaluator consults this table before ordinary procedure application.
"""

from minischeme.types.symbol import Symbol
from minischeme.evaluation.special_forms.define_form import define_form

SPECIAL_FORMS = {
    Symbol("define"): define_form,
}
