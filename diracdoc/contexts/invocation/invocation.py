"""
Dirac Invocation Module

Encapsulates one call to the dirac executable: builds its command line,
runs it as a subprocess and formats the captured output as a LaTeX equation.
"""

import subprocess
from dataclasses import dataclass, replace
from enum import Enum
from pathlib import Path
from typing import Any, List, Mapping, Optional, Union

from diracdoc.contexts.invocation.exceptions import InvalidCaseError
from diracdoc.contexts.invocation.logger import log_invocation_result, log_invocation_start

# Case mapping keys accepted by from_mapping(), with their field names
CASE_KEYS = {
    "info": "description",
    "description": "description",
    "expr": "expression",
    "expression": "expression",
    "line_length": "line_length",
    "lhs": "lhs",
    "mode": "mode",
    "dummy": "dummy",
    "apply_symmetry": "apply_symmetry",
}

SYMMETRY_VALUES = {"true": True, "false": False}


class ArithmeticMode(str, Enum):
    """Arithmetic used by dirac for numeric coefficients (-m option)."""

    FLOAT = "float"
    RATIONAL = "rational"


@dataclass(frozen=True)
class InvocationResult:
    """
    Result of running the dirac executable for one expression.

    Attributes:
        raw_output: Standard output captured from dirac
        exit_code: Process exit status
        rendered_equation: LaTeX equation environment built from the output
        stderr: Standard error captured from dirac (logged, never rendered)
    """

    raw_output: str
    exit_code: int
    rendered_equation: str
    stderr: str = ""

    @property
    def succeeded(self) -> bool:
        return self.exit_code == 0


@dataclass(frozen=True)
class DiracInvocation:
    """
    A single request to the dirac executable.

    Attributes:
        expression: Expression passed with the -e option
        description: Label written before the equation in the document
        line_length: Terms per output line (-l); 0 or less requests no wrapping
        lhs: Left-hand side shown in the equation; the expression when None
        mode: Arithmetic mode (-m), tool default when None
        dummy: Dummy index name (-d)
        apply_symmetry: Whether dirac applies index symmetries (-s)
    """

    expression: str
    description: str = ""
    line_length: int = 0
    lhs: Optional[str] = None
    mode: Optional[ArithmeticMode] = None
    dummy: Optional[str] = None
    apply_symmetry: Optional[bool] = None

    def __post_init__(self):
        # Frozen dataclass: normalise through object.__setattr__
        if self.description is None:
            object.__setattr__(self, "description", "")
        if self.line_length is None:
            object.__setattr__(self, "line_length", 0)
        if isinstance(self.line_length, bool) or not isinstance(self.line_length, int):
            raise ValueError(f"Invalid line_length {self.line_length!r}. Must be an integer")
        if self.mode is not None and not isinstance(self.mode, ArithmeticMode):
            try:
                object.__setattr__(self, "mode", ArithmeticMode(str(self.mode).lower()))
            except ValueError:
                raise ValueError(
                    f"Invalid mode {self.mode!r}. Must be 'float' or 'rational'"
                ) from None
        if isinstance(self.apply_symmetry, str):
            flag = SYMMETRY_VALUES.get(self.apply_symmetry.lower())
            if flag is None:
                raise ValueError(
                    f"Invalid apply_symmetry {self.apply_symmetry!r}. Must be 'true' or 'false'"
                )
            object.__setattr__(self, "apply_symmetry", flag)

    @classmethod
    def from_mapping(cls, case: Mapping[str, Any]) -> "DiracInvocation":
        """
        Build an invocation from a test case mapping.

        Accepts the short keys used in suite files (info, expr) as well as
        the field names.

        Args:
            case: Mapping with at least an "expr" or "expression" key

        Returns:
            DiracInvocation for the case

        Raises:
            InvalidCaseError: If the mapping has unknown keys or no expression
        """
        unknown = sorted(set(case) - set(CASE_KEYS))
        if unknown:
            raise InvalidCaseError(f"Unknown case keys: {', '.join(unknown)}", case)

        kwargs = {CASE_KEYS[key]: value for key, value in case.items()}
        if kwargs.get("expression") is None:
            raise InvalidCaseError("Case has no expression", case)

        try:
            return cls(**kwargs)
        except ValueError as e:
            raise InvalidCaseError(str(e), case) from e

    @property
    def display_lhs(self) -> str:
        """Left-hand side of the rendered equation."""
        return self.lhs if self.lhs is not None else self.expression

    def with_options(
        self,
        mode: Optional[Union[ArithmeticMode, str]] = None,
        dummy: Optional[str] = None,
        apply_symmetry: Optional[bool] = None,
    ) -> "DiracInvocation":
        """Copy of this invocation with the given (non-None) options overridden."""
        overrides = {
            name: value
            for name, value in (
                ("mode", mode),
                ("dummy", dummy),
                ("apply_symmetry", apply_symmetry),
            )
            if value is not None
        }
        return replace(self, **overrides) if overrides else self

    def _option_pairs(self) -> List[tuple]:
        """Optional flags in their fixed order: -l, -m, -d, -s."""
        options = []
        if self.line_length > 0:
            options.append(("-l", str(self.line_length)))
        if self.mode is not None:
            options.append(("-m", self.mode.value))
        if self.dummy is not None:
            options.append(("-d", self.dummy))
        if self.apply_symmetry is not None:
            options.append(("-s", "true" if self.apply_symmetry else "false"))
        return options

    def build_command(self, executable: Union[str, Path]) -> str:
        """
        Build the shell command line for this invocation.

        The expression is wrapped in double quotes and otherwise passed
        verbatim, so it must not contain characters that break shell quoting.

        Args:
            executable: Path to the dirac executable

        Returns:
            Command line like: /path/to/dirac -e "<expr>" -l 4 -m rational
        """
        command = f'{executable} -e "{self.expression}"'
        for flag, value in self._option_pairs():
            command += f" {flag} {value}"
        return command

    def build_args(self, executable: Union[str, Path]) -> List[str]:
        """Argument vector for running dirac without a shell."""
        args = [str(executable), "-e", self.expression]
        for flag, value in self._option_pairs():
            args.extend([flag, value])
        return args

    def format_equation(self, output: str, succeeded: bool) -> str:
        """
        Format dirac output as a LaTeX equation.

        Failed output is shown verbatim. Successful output with line wrapping
        requested is additionally placed in a split environment.

        Args:
            output: Captured standard output
            succeeded: Whether dirac exited with status 0

        Returns:
            LaTeX equation environment
        """
        rhs = output.rstrip()
        if not succeeded:
            rhs = f"\\verb|{rhs}|"

        equation = f"{self.display_lhs} = {rhs}"
        if self.line_length > 0 and succeeded:
            equation = f"\\begin{{split}}\n{equation}\n\\end{{split}}"
        return f"\\begin{{equation}}\n{equation}\n\\end{{equation}}"

    def run(self, executable: Union[str, Path], use_shell: bool = True) -> InvocationResult:
        """
        Run dirac for this invocation and format its output.

        A non-zero exit status is not raised: the output is rendered verbatim
        so a batch can continue with the next case. No timeout, no retry.

        Args:
            executable: Path to the dirac executable
            use_shell: Run build_command() through the shell (default). When
                False, build_args() is executed directly and the expression is
                never interpreted by a shell.

        Returns:
            InvocationResult with captured output and the rendered equation
        """
        command = self.build_command(executable)
        log_invocation_start(command)

        completed = subprocess.run(
            command if use_shell else self.build_args(executable),
            shell=use_shell,
            capture_output=True,
            text=True,
            encoding="utf-8",
            errors="replace",
        )

        stdout = completed.stdout or ""
        succeeded = completed.returncode == 0
        result = InvocationResult(
            raw_output=stdout,
            exit_code=completed.returncode,
            rendered_equation=self.format_equation(stdout, succeeded),
            stderr=completed.stderr or "",
        )

        log_invocation_result(self.expression, result)
        return result
