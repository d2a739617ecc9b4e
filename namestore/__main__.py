"""Allow ``python -m namestore``."""

from namestore.cli.main import main

raise SystemExit(main())
