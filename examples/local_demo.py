import sys
from pathlib import Path

# Ensure the repo root is on sys.path when running as a script.
sys.path.insert(0, str(Path(__file__).resolve().parents[1]))

from nvram import MemoryNvram, NotFoundError
from store import NvramStore

PAIRING_UUID = "310FC158-B29E-4F52-B5B2-A742CDFCE81A"


def main() -> int:
    nvram = MemoryNvram()
    store = NvramStore(nvram)

    # ===== Startup: identity and schema, no flash writes =====
    store.set("uuid", b"AA:BB:CC:DD:EE:FF")
    store.set("keypair", b'{"Public":"...","Private":"..."}')
    store.set("schema", b"1")
    store.set("version", b"2")
    store.set("configHash", bytes.fromhex("0001fffe807f"))
    print("[startup] commits:", nvram.commit_count)
    print("[startup] configHash at rest:", nvram.data["hkt_configHash"])

    # ===== Pairing added: one flash write =====
    pairing_key = PAIRING_UUID.encode().hex() + ".pairing"
    store.set(pairing_key, b'{"Name":"%s"}' % PAIRING_UUID.encode())
    print("[pair] commits:", nvram.commit_count)
    print("[pair] nvram names:", sorted(nvram.data))
    print("[pair] pairings:", store.keys_with_suffix(".pairing"))

    # ===== Reboot: everything committed with the pairing survives =====
    store.set("version", b"3")
    nvram.power_cycle()
    print("[reboot] version:", store.get("version").decode())

    # ===== Pairing removed: one more flash write =====
    store.delete(pairing_key)
    print("[unpair] commits:", nvram.commit_count)
    try:
        store.get(pairing_key)
    except NotFoundError as e:
        print("[unpair] get:", e)

    return 0


if __name__ == "__main__":
    raise SystemExit(main())
