from lispy.repl import main

raise SystemExit(main())
