"""
Virtuous Intolerance - correct implementation

QualityGate parses each source file with ``ast`` and ``tokenize`` and
reports deprecated calls, unused names, magic numbers and TODO markers.
Nothing is "just a warning": every finding is blocking, the first failing
file stops the build and the error lists everything that has to be fixed.
Runtime deprecations get the same treatment through the warnings module.
"""

import ast
import io
import tokenize
import warnings
from dataclasses import dataclass
from typing import Dict, List

DEPRECATED_CALLS = {
    "eval": "eval() is dangerous; parse the data instead",
    "utcnow": "datetime.utcnow() is deprecated; use datetime.now(timezone.utc)",
    "assertEquals": "assertEquals() is deprecated; use assertEqual()",
}
ALLOWED_NUMBERS = {0, 1, -1}


@dataclass(frozen=True)
class Finding:
    kind: str
    message: str
    line: int


class QualityError(Exception):
    def __init__(self, file_name: str, findings: List[Finding]):
        self.file_name = file_name
        self.findings = findings
        details = "\n".join(f"  {i}. [{f.kind}] line {f.line}: {f.message}" for i, f in enumerate(findings, 1))
        super().__init__(f"{file_name} failed validation:\n{details}")


class _Collector(ast.NodeVisitor):
    def __init__(self):
        self.findings: List[Finding] = []
        self.stored: Dict[str, int] = {}
        self.loaded = set()
        self._constant_targets = 0

    def visit_Call(self, node):
        name = node.func.attr if isinstance(node.func, ast.Attribute) else getattr(node.func, "id", "")
        if name in DEPRECATED_CALLS:
            self.findings.append(Finding("DEPRECATED_API", DEPRECATED_CALLS[name], node.lineno))
        self.generic_visit(node)

    def visit_Name(self, node):
        if isinstance(node.ctx, ast.Store):
            self.stored.setdefault(node.id, node.lineno)
        else:
            self.loaded.add(node.id)

    def visit_Assign(self, node):
        # NAME = 100 at any level is how a constant gets its name
        named = all(isinstance(t, ast.Name) and t.id.isupper() for t in node.targets)
        self._constant_targets += named
        self.generic_visit(node)
        self._constant_targets -= named

    def visit_Constant(self, node):
        value = node.value
        if (not self._constant_targets and isinstance(value, (int, float))
                and not isinstance(value, bool) and value not in ALLOWED_NUMBERS):
            self.findings.append(Finding("MAGIC_NUMBER", f"{value!r} should be a named constant", node.lineno))


class QualityGate:
    def check(self, file_name: str, source: str) -> None:
        """Raise QualityError listing every finding in ``source``."""
        collector = _Collector()
        collector.visit(ast.parse(source, filename=file_name))
        findings = list(collector.findings)
        for name, line in collector.stored.items():
            if name not in collector.loaded and not name.isupper() and not name.startswith("_"):
                findings.append(Finding("UNUSED_NAME", f"{name!r} is assigned but never used", line))
        for token in tokenize.generate_tokens(io.StringIO(source).readline):
            if token.type == tokenize.COMMENT and "TODO" in token.string.upper():
                findings.append(Finding("TECHNICAL_DEBT", "TODO left in code; finish it or file a ticket",
                                        token.start[0]))
        if findings:
            raise QualityError(file_name, sorted(findings, key=lambda f: f.line))

    def build(self, files: Dict[str, str]) -> List[str]:
        passed = []
        for file_name, source in files.items():
            self.check(file_name, source)
            print(f"PASS {file_name}")
            passed.append(file_name)
        return passed


def legacy_total(prices):
    warnings.warn("legacy_total() is deprecated; use sum()", DeprecationWarning, stacklevel=2)
    return sum(prices)


def call_strictly(function, *args):
    """Call ``function`` with every warning raised as an exception."""
    with warnings.catch_warnings():
        warnings.simplefilter("error")
        return function(*args)


CLEAN = '''
MAX_USERS = 100
users = []


def add_user(user):
    if len(users) < MAX_USERS:
        users.append(user)
        return True
    return False
'''

PROBLEMATIC = '''
from datetime import datetime

users = []
unused_variable = "not used anywhere"


def add_user(user):
    # TODO: enforce a limit
    if len(users) < 250:
        users.append({"user": user, "at": datetime.utcnow()})
    return True
'''


def main():
    gate = QualityGate()
    try:
        gate.build({"users_clean.py": CLEAN, "users_problematic.py": PROBLEMATIC, "never_reached.py": CLEAN})
    except QualityError as e:
        print(f"FAIL {e}")
        print("Build stopped; nothing ships until every finding is fixed.")

    print("\nCalling a deprecated helper with warnings as errors:")
    try:
        call_strictly(legacy_total, [1, 2])
    except DeprecationWarning as e:
        print(f"Blocked: {e}")


if __name__ == "__main__":
    main()
