"""Registry of special forms for the Kappa evaluator.

Each reserved keyword is a member of SpecialForm, and SPECIAL_FORMS maps every
member to the handler that implements its evaluation rule. The evaluator
resolves a form's head against this table before ordinary procedure
application, so a keyword always wins over a variable of the same name.
"""

from __future__ import annotations

from enum import Enum
from typing import Callable, Optional

from kappa import SExpression, LispValue, EvaluatorFn
from kappa.types.environment import Frame
from kappa.types.symbol import Symbol
from kappa.evaluation.special_forms.if_form import if_form
from kappa.evaluation.special_forms.let_forms import let_form, let_star_form, letrec_form
from kappa.evaluation.special_forms.quote_forms import quote_form
from kappa.evaluation.special_forms.define_form import define_form
from kappa.evaluation.special_forms.lambda_form import lambda_form
from kappa.evaluation.special_forms.set_form import set_form
from kappa.evaluation.special_forms.progn_form import begin_form
from kappa.evaluation.special_forms.logic_forms import and_form, or_form
from kappa.evaluation.special_forms.cond_form import cond_form

SpecialFormFn = Callable[[list[SExpression], Frame, EvaluatorFn], LispValue]


class SpecialForm(Enum):
    IF = "if"
    LET = "let"
    LET_STAR = "let*"
    LETREC = "letrec"
    QUOTE = "quote"
    DEFINE = "define"
    LAMBDA = "lambda"
    SET = "set!"
    BEGIN = "begin"
    AND = "and"
    OR = "or"
    COND = "cond"


SPECIAL_FORMS: dict[SpecialForm, SpecialFormFn] = {
    SpecialForm.IF: if_form,
    SpecialForm.LET: let_form,
    SpecialForm.LET_STAR: let_star_form,
    SpecialForm.LETREC: letrec_form,
    SpecialForm.QUOTE: quote_form,
    SpecialForm.DEFINE: define_form,
    SpecialForm.LAMBDA: lambda_form,
    SpecialForm.SET: set_form,
    SpecialForm.BEGIN: begin_form,
    SpecialForm.AND: and_form,
    SpecialForm.OR: or_form,
    SpecialForm.COND: cond_form,
}

_missing = set(SpecialForm) - SPECIAL_FORMS.keys()
if _missing:
    raise ImportError(f"No handler for special forms: {sorted(f.value for f in _missing)}")

_KEYWORDS: dict[Symbol, SpecialForm] = {Symbol(form.value): form for form in SpecialForm}


def special_form_of(head: Symbol) -> Optional[SpecialForm]:
    """The special form named by `head`, or None for an ordinary symbol."""
    return _KEYWORDS.get(head)
