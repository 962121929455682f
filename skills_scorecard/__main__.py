"""Entry point for running skills-scorecard as a module.

This allows the package to be executed as:
    python -m skills_scorecard

It delegates to the CLI main function.
"""

from skills_scorecard.cli.main import main

if __name__ == "__main__":
    main()
