# edsig

Ed25519 signatures in plain Python. It needs nothing outside the standard
library. The package generates key pairs, derives public keys, signs messages
and verifies signatures. Underneath are the pieces of curve arithmetic that
these operations use:

- field elements modulo 2^255 - 19
- scalars modulo the group order
- points on the twisted Edwards curve

The code does not run in constant time. It suits learning how Ed25519 works,
testing against, or checking signatures. Do not use it where timing side
channels matter.

## Installation

```
pip install .
```

To install and run the test suite:

```
pip install .[test]
pytest
```

## Usage

```python
from edsig.ed25519 import create_keypair, derive_public_key, sign, verify

private_key, public_key = create_keypair()
signature = sign(b"ed25519", public_key, private_key)

assert verify(signature, b"ed25519", public_key)
assert not verify(signature, b"tampered", public_key)
assert derive_public_key(private_key) == public_key
```

Keys and signatures are `bytes`:

| item        | length   |
|-------------|----------|
| private key | 32 bytes |
| public key  | 32 bytes |
| signature   | 64 bytes |

The module exports these lengths as `PRIVATE_KEY_SIZE`, `PUBLIC_KEY_SIZE` and
`SIGNATURE_SIZE`.

### Errors and results

- `verify` returns `True` or `False`. It returns `False` when the top three
  bits of the signature's last byte are set, and when the public key does not
  decode to a curve point.
- `create_keypair` raises `Ed25519Error` if the system cannot supply random
  bytes.
- If a key or signature has the wrong length, the function raises
  `ValueError`. Arguments that are not bytes-like raise `TypeError`.

`compute_hram(signed_message, public_key)` returns the SHA-512 digest of
R || A || M. It takes a signed message laid out as R || S || M.

### Building blocks

- `edsig.field.FieldElement`: arithmetic modulo 2^255 - 19. It supports `+`,
  `-`, `*`, negation, `square`, `invert` and `pow2523`. It also provides
  `parity` and `is_zero`. `to_bytes` and `from_bytes` convert to and from
  32-byte little-endian form.
- `edsig.limbs.LimbElement`: the same field, held as ten signed limbs in radix
  2^25.5. It provides `zero`, `one`, `from_bytes`, `to_int`, `copy`, `cmov`,
  `is_negative`, `is_nonzero`, `invert`, `pow22523`, and `+`, `*` and
  negation.
- `edsig.scalar.Scalar`: scalars modulo the group order `ORDER`. It provides:
  - `from_bytes32` and `from_bytes64` to decode, and `to_bytes` to encode
  - `+`, `*` and `<`
  - `subtract_unreduced`, which wraps at 2^256 instead of reducing
  - the signed radix-16 `window4` and sliding-window `slide` digit expansions
- `edsig.heap.IndexHeap`: a max-heap of indices into a list of scalars.
  `multi_scalarmult` uses it.
- `edsig.group.Point`: curve points in extended coordinates. It provides:
  - `neutral` and `base`
  - `from_bytes_negated` and `to_bytes`
  - `double`, `+`, negation, `==`, `is_neutral` and `scalar_mult`

  The module also has these functions:
  - `scalarmult_base(scalar)`: scalar × base point
  - `double_scalarmult(point, s1, s2)`: s1 × point + s2 × base
  - `multi_scalarmult(points, scalars)`: the Bos-Coster method. It needs at
    least five points.

## Command-line tools

`edsig-demo` creates a fresh key pair, signs a message, verifies the signature
and prints the public key and the signature in hex. The default message is
`ed25519`. It exits with status 0 when the signature verifies and 1 otherwise.

```
edsig-demo
edsig-demo "some message"
echo "some message" | edsig-demo --stdin
```

`edsig-bench` times signing, SHA-512 hashing, verification of a correct and a
broken signature, and key generation. It prints one line per case with the
average time per repetition.

```
edsig-bench
edsig-bench --iterations 3 --sizes 1 100 10000
```

By default it runs 10 repetitions over message sizes from 1 byte to
1,000,000 bytes. In pure Python the largest sizes take a while.

## What it does not do

- There is no key storage. Keys exist only as `bytes` that you keep yourself.
- No command signs or verifies with a key you supply. `edsig-demo` always uses
  a freshly generated key pair.
- There is no batch verification API. `multi_scalarmult` is available as a
  building block only.