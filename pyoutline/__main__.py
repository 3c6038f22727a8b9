from pyoutline.main import main

raise SystemExit(main())
