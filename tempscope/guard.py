# tempscope/guard.py
from __future__ import annotations

import threading

# One lock for every create/remove across all Directory and File handles.
# Reentrant: a handle collected inside another handle's critical section
# runs its __del__ on the same thread.
lock = threading.RLock()
