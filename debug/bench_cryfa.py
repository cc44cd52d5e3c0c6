#!/usr/bin/env python3
"""Quick cryfa benchmark - key derivation and encrypt/decrypt timing"""
import time


PASSWORD = "benchmark-password"
RECORD = b">seq synthetic\n" + b"ACGTACGTAC" * 6 + b"\n"
FASTA = RECORD * 20000


def bench(label, func, iterations):
    start = time.perf_counter()
    for _ in range(iterations):
        result = func()
    elapsed = time.perf_counter() - start
    print(f"  {label}: {elapsed:.3f}s ({elapsed / iterations * 1000:.2f} ms/op)")
    return result


def main():
    import cryfa

    print(f"Input size: {len(FASTA) / 1024:.1f} KiB\n")

    bench("derive", lambda: cryfa.derive_key_material(PASSWORD), 200)
    blob = bench("encrypt", lambda: cryfa.encrypt(FASTA, PASSWORD), 20)
    plain = bench("decrypt", lambda: cryfa.decrypt(blob, PASSWORD), 20)

    assert plain == FASTA
    print("\n✅ cryfa benchmark complete")


if __name__ == '__main__':
    main()
