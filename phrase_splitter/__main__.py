"""Package entry point for ``python -m phrase_splitter``.

WHY: Users run the splitter as ``python -m phrase_splitter transcript.txt``
or pipe text into ``python -m phrase_splitter -``. Python's ``-m`` flag looks
for ``__main__.py`` inside the package and executes it.

HOW: Delegates to the CLI's main() function.
"""

from phrase_splitter.cli import main

if __name__ == "__main__":
    main()
