from curvy.cli import main

raise SystemExit(main())
