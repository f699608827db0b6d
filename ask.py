import sys
import traceback

from groqask.cli import main

if __name__ == "__main__":
    try:
        code = main()
    except Exception:
        print("CRITICAL ERROR CAUGHT:", file=sys.stderr)
        traceback.print_exc()
        sys.exit(1)
    sys.exit(code)
