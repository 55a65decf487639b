from yangfmt.cli import main

raise SystemExit(main())
