"""Resume and cover-letter rendering to PDF and DOCX."""

__version__ = "0.1.0"


def main() -> int:
    from resume_tailor.cli import main as cli_main

    return cli_main()
