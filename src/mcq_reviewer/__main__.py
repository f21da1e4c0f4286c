"""Allow ``python -m mcq_reviewer``."""

from mcq_reviewer.cli import main

raise SystemExit(main())
