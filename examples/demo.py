#!/usr/bin/env python3
"""
Demo of the DH-OPRF used for password hardening.

This demonstrates the basic usage of the OPRF protocol:
1. Set up a server with a secret key
2. Blind a password on the client
3. Evaluate on the server and finalize on the client
"""

import sys
from pathlib import Path

# Add parent directory to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))

from Crypto.Random import get_random_bytes

from pake.oprf import RISTRETTO255, Client, Server


def main():
    print("=" * 60)
    print("DH-OPRF Password Hardening Demo")
    print("=" * 60)

    # Server key: a fresh random scalar
    key = RISTRETTO255.random_scalar(get_random_bytes)
    server = Server(key)
    client = Client()
    print(f"\nParameters: {server.params}")

    password = b"hunter2"
    outputs = []
    for i in range(3):
        with client.blind(password) as state:
            alpha_wire = state.alpha_bytes()
            beta_wire = server.evaluate(alpha_wire)
            output = client.finalize(password, beta_wire, state)
        outputs.append(output)
        print(f"\n[{i + 1}] alpha  = {alpha_wire.hex()}")
        print(f"    beta   = {beta_wire.hex()}")
        print(f"    output = {output.hex()}")

    print(f"\nAll outputs equal: {len(set(outputs)) == 1}")

    print("\n" + "=" * 60)
    print("Demo complete!")
    print("=" * 60)


if __name__ == "__main__":
    main()
