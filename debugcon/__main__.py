"""
Entry point for running debugcon as a Python module: `python -m debugcon`

Both this and the `debugcon` console script from pyproject.toml call the same
`main()` function.
"""

from .main import main

if __name__ == "__main__":
    main()
