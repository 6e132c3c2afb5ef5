from __future__ import annotations

from line_reader.main import main

raise SystemExit(main())
