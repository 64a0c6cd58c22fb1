"""
Virtuous Intolerance - violation

The build scans for the same problems but only counts them. Warnings are
printed, summed and ignored, deprecation warnings are silenced so the log
looks clean, and the build reports success with a growing pile of
"known" issues nobody is responsible for.
"""

import re
import warnings

CHECKS = {
    "deprecated call": re.compile(r"\b(eval|utcnow|assertEquals)\("),
    "todo": re.compile(r"#\s*TODO", re.IGNORECASE),
    "magic number": re.compile(r"(?<![\w.])[2-9]\d+\b"),
}


def lenient_build(files):
    total = 0
    for file_name, source in files.items():
        for label, pattern in CHECKS.items():
            hits = len(pattern.findall(source))
            if hits:
                print(f"warning: {file_name}: {hits} {label}(s)")
                total += hits
    print(f"BUILD SUCCESSFUL with {total} warning(s)")
    return True


def legacy_total(prices):
    warnings.warn("legacy_total() is deprecated; use sum()", DeprecationWarning, stacklevel=2)
    return sum(prices)


PROBLEMATIC = '''
users = []
unused_variable = "not used anywhere"

def add_user(user):
    # TODO: enforce a limit
    if len(users) < 250:
        users.append({"user": user, "at": datetime.utcnow()})
    return True
'''


def main():
    for copies, release in enumerate(("1.0", "1.1", "1.2"), 1):
        print(f"Release {release}:")
        lenient_build({"users.py": PROBLEMATIC * copies})

    with warnings.catch_warnings():
        warnings.simplefilter("ignore")  # keep the logs quiet
        print(f"\nlegacy_total still in use: {legacy_total([1, 2])}")


if __name__ == "__main__":
    main()
