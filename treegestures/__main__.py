from treegestures.app.main import main

raise SystemExit(main())
