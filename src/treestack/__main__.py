from treestack.cli import main

raise SystemExit(main())
