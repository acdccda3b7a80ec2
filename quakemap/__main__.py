from quakemap.cli import main

raise SystemExit(main())
