from hostenv.cli import main

raise SystemExit(main())
