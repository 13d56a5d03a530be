from uttarakhand_news.cli import main

raise SystemExit(main())
