from verse_phonetics.cli import main

raise SystemExit(main())
