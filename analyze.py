"""Compatibility wrapper for producing a frequency report.

Use the packaged CLI instead:
    python -m text_frequency --file story.txt
or install the package and run `text-frequency --file story.txt`.
"""

from text_frequency.cli import run


if __name__ == "__main__":
    run()
