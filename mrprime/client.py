import os
from typing import Optional

import requests

MR_BASE_URL = (os.getenv("MR_BASE_URL", "http://127.0.0.1:8080") or "http://127.0.0.1:8080").rstrip("/")
MR_TIMEOUT  = float(os.getenv("MR_TIMEOUT", "15"))

class MRClient:
    """Thin JSON client for the /api/mr service."""

    def __init__(self, base_url: str = MR_BASE_URL, timeout: float = MR_TIMEOUT):
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self.session = requests.Session()
        self.session.headers.update({"User-Agent": "mrprime-client/1.0", "Accept": "application/json"})

    def health(self) -> dict:
        r = self.session.get(f"{self.base_url}/api/health", timeout=self.timeout)
        r.raise_for_status()
        return r.json()

    def check(self, n: int, rounds: Optional[int] = None, seed: Optional[int] = None) -> dict:
        payload = {"n": str(n)}
        if rounds is not None:
            payload["rounds"] = int(rounds)
        if seed is not None:
            payload["seed"] = int(seed)
        r = self.session.post(f"{self.base_url}/api/mr", json=payload, timeout=self.timeout)
        r.raise_for_status()
        return r.json()

    def is_probable_prime(self, n: int, rounds: Optional[int] = None) -> bool:
        return bool(self.check(n, rounds=rounds)["probable_prime"])
