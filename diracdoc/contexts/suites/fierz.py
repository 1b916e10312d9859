"""
Sixth-order Fierz identities

Generates the products of Dirac structures whose simplification by dirac
gives the sixth-order Fierz identity table. Each row of FIERZ_FORMS holds
three fixed factors; an element of FIRST_INSERTIONS goes between the first
two and an element of SECOND_INSERTIONS between the last two.
"""

from typing import Iterator

from diracdoc.contexts.invocation import DiracInvocation

FIERZ_FORMS = [
    ("1", "1", "1"),
    ("1", r"\gamma_\mu", r"\gamma^\mu"),
    ("1", r"\sigma_{\mu\nu}", r"\sigma^{\mu\nu}"),
    ("1", r"\gamma5\gamma_\mu", r"\gamma5\gamma^\mu"),
    ("1", r"\gamma5", r"\gamma5"),
    (r"\gamma5", r"\gamma_\mu", r"\gamma5\gamma^\mu"),
    (r"\gamma_\mu", r"\gamma_\nu", r"\sigma^{\mu\nu}"),
    (r"\gamma5\gamma_\mu", r"\gamma5\gamma_\nu", r"\sigma^{\mu\nu}"),
    (r"\epsilon_{\kappa\lambda\mu\nu}\gamma^\kappa", r"\gamma5\gamma^\lambda", r"\sigma^{\mu\nu}"),
    (r"\epsilon_{\kappa\lambda\mu\nu}\gamma5", r"\sigma^{\kappa\lambda}", r"\sigma^{\mu\nu}"),
    (r"{\sigma_\kappa}^\lambda", r"{\sigma_\lambda}^\mu", r"{\sigma_\mu}^\kappa"),
]

# Scalar, vector, tensor, axial and pseudoscalar bases with disjoint free indices
FIRST_INSERTIONS = ["1", r"\gamma_\alpha", r"\sigma_{\alpha\beta}", r"\gamma5\gamma_\alpha", r"\gamma5"]
SECOND_INSERTIONS = ["1", r"\gamma_\gamma", r"\sigma_{\gamma\delta}", r"\gamma5\gamma_\gamma", r"\gamma5"]

FIERZ_LINE_LENGTH = 4


def fierz_expression(form, first: str, second: str) -> str:
    """Product of a form row with two inserted structures, in dirac syntax."""
    return f"{form[0]}*{first}*{form[1]}*{second}*{form[2]}"


def latex_lhs(expression: str) -> str:
    r"""Display form of a dirac expression (\gamma5 becomes \gamma^5)."""
    return expression.replace(r"\gamma5", r"\gamma^5")


def fierz_invocations(line_length: int = FIERZ_LINE_LENGTH) -> Iterator[DiracInvocation]:
    """
    Yield one invocation per form row and pair of insertions.

    Order is form-major, then first insertion, then second insertion
    (11 x 5 x 5 = 275 invocations).

    Args:
        line_length: Terms per output line requested from dirac

    Yields:
        DiracInvocation with an empty description
    """
    for form in FIERZ_FORMS:
        for first in FIRST_INSERTIONS:
            for second in SECOND_INSERTIONS:
                expression = fierz_expression(form, first, second)
                yield DiracInvocation(
                    expression=expression,
                    lhs=latex_lhs(expression),
                    line_length=line_length,
                )
