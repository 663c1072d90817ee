"""Support ``python -m indexify <dir> --root PATH``."""

from .cli import main


if __name__ == "__main__":
    main()
