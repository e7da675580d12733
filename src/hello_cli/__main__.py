from hello_cli.cli import main

raise SystemExit(main())
