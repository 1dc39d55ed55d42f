import os
import sys
from pathlib import Path

# modules live at the repository root
sys.path.insert(0, str(Path(__file__).parents[1]))

os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")
