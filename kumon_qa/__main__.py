"""Allow `python -m kumon_qa`."""

from kumon_qa.cli.qa_cli import run

if __name__ == "__main__":
    run()
