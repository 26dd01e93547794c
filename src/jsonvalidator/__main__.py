from jsonvalidator.cli import main

raise SystemExit(main())
