#!/usr/bin/env python3
"""Filter the job catalog and export the matches."""

import sys
from pathlib import Path

# Add src to path
sys.path.insert(0, str(Path(__file__).parent / "src"))

from job_planner.main import main

sys.exit(main())
