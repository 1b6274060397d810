"""Allow running the out step with ``python -m email_resource``."""

import sys

from email_resource.main import main

if __name__ == "__main__":
    sys.exit(main())
