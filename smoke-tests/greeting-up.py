import sys

import requests
from typing import Optional

def greeting_up(
   base_url: str,
   payload: Optional[dict] = None,
   timeout: float = 5.0
) -> str:
   base_url = base_url.rstrip("/")

   root = requests.get(f"{base_url}/", timeout=timeout)
   root.raise_for_status()

   anything = requests.post(f"{base_url}/anything", json=payload or {}, timeout=timeout)
   anything.raise_for_status()

   if root.content != anything.content:
       raise RuntimeError(f"{base_url}: GET / and POST /anything returned different bodies")
   content_type = root.headers.get("Content-Type")
   if content_type != "text/plain":
       raise RuntimeError(f"{base_url}: unexpected Content-Type {content_type!r}")

   return root.content.decode("utf-8")

smoke_payload = {
   "message": "hello",
   "items": [1, 2, 3],
}

if __name__ == "__main__":
   url = sys.argv[1] if len(sys.argv) > 1 else "http://localhost:3000"
   print(greeting_up(base_url=url, payload=smoke_payload), end="")
