"""Regenerate all SVG diagrams.

Each generator runs as a module from the repository root so that the
shared/ package resolves the same way it does under pytest.
"""
import os, subprocess, sys

_DIR = os.path.dirname(os.path.abspath(__file__))

_GENERATORS = [
    "onion.gen_onion",
]


def main():
    for module in _GENERATORS:
        print(f"  running {module} ...")
        subprocess.check_call([sys.executable, "-m", module], cwd=_DIR)
    print("done.")


if __name__ == "__main__":
    main()
