"""Backend for the portfolio contact form."""


def _get_version() -> str:
    import tomllib
    from importlib.metadata import PackageNotFoundError, version
    from pathlib import Path

    pyproject = Path(__file__).parent.parent / "pyproject.toml"
    if pyproject.is_file():
        with pyproject.open("rb") as file:
            return str(tomllib.load(file)["project"]["version"])

    try:
        return version("portfolio-backend")
    except PackageNotFoundError:
        return "0.0.0"


__version__ = _get_version()
