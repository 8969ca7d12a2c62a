"""
calschema.geometry.troesch
--------------------------
Troesch analysis: recover a quasi-affine form from the bare sequence of
its period lengths (its code), e.g. the lengths of the 12 months of a year
or the lengths of the years of a leap cycle.

Each reduction step turns a code of height 1 into a shorter code by
slicing its 0/1 word after every 1, and records the map that relates the
forms of the two codes. When the reduction ends on a constant code {c},
folding (c, 1, 0) back through the recorded maps yields a form whose
code, read from x = 0, is the input.

    codes:  [30, 29, 30, 29, ...]  ->  [2, 2, 2, 2, 2]
    maps:   (shear=29, complement=False, translate=1)
    form:   (2, 1, 0)  --apply_back-->  (59, 2, 1)

The analyzer never raises on a code without a form; it returns a failed
TroeschAnalysis, or None from try_convert_code_to_form().
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Callable, List, Optional, Sequence, Tuple, Union

from ..core.arith import modulo
from ..core.errors import UnsupportedOperationError
from .discrete import CodeArray
from .forms import QuasiAffineForm

logger = logging.getLogger(__name__)

CodeLike = Union[CodeArray, Sequence[int]]


@dataclass(frozen=True)
class TroeschMap:
    """
    Relates the form of a code to the form of its reduced code.

      shear       the minimum of the code being reduced
      complement  True if the 0/1 word was negated before slicing
      translate   length of the initial slice removed (0 if kept)
    """
    shear: int
    complement: bool
    translate: int

    # ---------------------------------------------------------
    # Algebraic action on forms
    # ---------------------------------------------------------

    def apply(self, form: QuasiAffineForm) -> QuasiAffineForm:
        """Form of the reduced code, given the form of the code."""
        a, b, r = form
        s, T = self.shear, self.translate
        if self.complement:
            B = (s + 1) * b - a
            return QuasiAffineForm(b, B, B - 1 - modulo(-1 - r - T * a, b))
        B = a - s * b
        return QuasiAffineForm(b, B, B - 1 - modulo(r + T * a, b))

    def apply_back(self, form: QuasiAffineForm) -> QuasiAffineForm:
        """Form of the code, given the form of the reduced code."""
        a, b, r = form
        s, T = self.shear, self.translate
        rem = modulo(b - 1 - r - T * b, a)
        if self.complement:
            return QuasiAffineForm(s * a + a - b, a, a - 1 - rem)
        return QuasiAffineForm(s * a + b, a, rem)

    # ---------------------------------------------------------
    # Same action, spelled out as plane transforms
    # ---------------------------------------------------------

    def transform(self, form: QuasiAffineForm) -> QuasiAffineForm:
        return self.transform_walkthrough(form)[-1]

    def transform_back(self, form: QuasiAffineForm) -> QuasiAffineForm:
        return self.transform_back_walkthrough(form)[-1]

    def transform_walkthrough(self, form: QuasiAffineForm) -> List[QuasiAffineForm]:
        f1 = form.apply_vertical_shear(-self.shear)
        if not self.complement:
            return [f1, f1.apply_translation(-self.translate).apply_orthogonal_symmetry()]
        f2 = f1.apply_oblique_symmetry()
        return [f1, f2, f2.apply_translation(-self.translate).apply_orthogonal_symmetry()]

    def transform_back_walkthrough(self, form: QuasiAffineForm) -> List[QuasiAffineForm]:
        f1 = form.apply_back_orthogonal_symmetry().apply_translation(self.translate)
        if not self.complement:
            return [f1, f1.apply_vertical_shear(self.shear)]
        f2 = f1.apply_oblique_symmetry()
        return [f1, f2, f2.apply_vertical_shear(self.shear)]


def _reduce(code: CodeArray) -> Tuple[CodeArray, TroeschMap]:
    bools = code.to_bool_array()
    negated = not bools.is_true_isolated()
    if negated:
        bools = bools.negate()
    new_code, g = bools.slice().remove_minor_externals()
    return new_code, TroeschMap(code.min, negated, g)


def _as_code(code: CodeLike) -> CodeArray:
    return code if isinstance(code, CodeArray) else CodeArray(code)


def _ends_in_form(output: CodeArray) -> bool:
    # No form (a > 0) has the code {0}.
    return output.constant and output.min > 0


def _fold_back(output: CodeArray, maps: Sequence[TroeschMap]) -> QuasiAffineForm:
    form = output.to_form()
    for m in reversed(maps):
        form = m.apply_back(form)
    return form


@dataclass(frozen=True)
class TroeschAnalysis:
    """
    Outcome of analyze(). On success `form` is a form of `input`; `codes`
    is the reduction trail (input first, output last) and maps[i] relates
    codes[i] to codes[i + 1].
    """
    input: CodeArray
    output: CodeArray
    codes: Tuple[CodeArray, ...]
    maps: Tuple[TroeschMap, ...]
    form: Optional[QuasiAffineForm]

    @property
    def success(self) -> bool:
        return self.form is not None

    def _require_success(self) -> QuasiAffineForm:
        if self.form is None:
            raise UnsupportedOperationError(f"No form was found for {self.input!r}.")
        return self.form

    def reverse_walkthrough(self) -> List[QuasiAffineForm]:
        """Every intermediate form, from the constant form to the final one."""
        self._require_success()
        forms = [self.output.to_form()]
        for m in reversed(self.maps):
            forms.extend(m.transform_back_walkthrough(forms[-1]))
        return forms

    def walkthrough(self, form: Optional[QuasiAffineForm] = None) -> List[QuasiAffineForm]:
        """Every intermediate form, from `form` (default: the final one) to the constant one."""
        final = self._require_success()
        forms = [final if form is None else form]
        for m in self.maps:
            forms.extend(m.transform_walkthrough(forms[-1]))
        return forms

    def transformer(self) -> Callable[[QuasiAffineForm], QuasiAffineForm]:
        """Composite of the forward maps, sending the final form to the constant one."""
        self._require_success()
        maps = self.maps

        def _transform(form: QuasiAffineForm) -> QuasiAffineForm:
            for m in maps:
                form = m.transform(form)
            return form

        return _transform


def analyze(code: CodeLike) -> TroeschAnalysis:
    code = _as_code(code)
    codes = [code]
    maps: List[TroeschMap] = []
    current = code
    while current.strictly_reducible:
        current, m = _reduce(current)
        logger.debug("troesch step %d: %s -> %s", len(maps), m, current)
        codes.append(current)
        maps.append(m)

    form = _fold_back(current, maps) if _ends_in_form(current) else None
    if form is None:
        logger.debug("troesch: no form for %s, stopped at %s", code, current)
    return TroeschAnalysis(
        input=code,
        output=current,
        codes=tuple(codes),
        maps=tuple(maps),
        form=form,
    )


def try_convert_code_to_form(code: CodeLike) -> Optional[QuasiAffineForm]:
    """Like analyze(code).form, without keeping the reduction trail."""
    current = _as_code(code)
    maps: List[TroeschMap] = []
    while current.strictly_reducible:
        current, m = _reduce(current)
        maps.append(m)
    if not _ends_in_form(current):
        return None
    return _fold_back(current, maps)
