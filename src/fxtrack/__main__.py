# src/fxtrack/__main__.py
from fxtrack.app import main

if __name__ == "__main__":
    main()
