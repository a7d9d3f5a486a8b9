# zledger

Building blocks for a small ledger:

- `zledger.money`: `Money`, a fixed-point amount with nine decimal places. It is held as an unsigned 64-bit integer, parsed with `Money.parse`, and printed in its short decimal form followed by the symbol `ZSH`. Bad input raises `ParseMoneyError`.
- `zledger.hashing`: `sha3_hash`, which returns the 32-byte SHA3-256 digest of some bytes.
- `zledger.merkle`: `MerkleTree`, with `root()`, `depth()`, `num_leaves()` and membership proofs from `prove()`. `merge_hash` combines two nodes.
- `zledger.ed25519`: Ed25519 key pairs derived from a seed (`generate_keys`), with `sign` and `verify`. `PublicKey.parse` reads the `0x`-prefixed, byte-reversed hex form that `str()` writes.
- `zledger.jubjub`: points on the JubJub twisted Edwards curve (`PointAffine`, `PointProjective`, `PointCompressed`) with addition, doubling, scalar multiplication, compression and decompression. `ZkPublicKey` parses and prints the `0z2`/`0z3` key form.
- `zledger.address`: `Address` (the treasury or a public-key account), `Account`, `ZkAccount` and `ContractId`.
- `zledger.kvstore`: `RamKvStore`, an in-memory key-value store, and `RamMirrorKvStore`, which buffers `Put`/`Remove` operations over another store and can produce rollback operations.
- `zledger.keys`: functions that build the string keys the ledger stores its data under.

## Installation

```
pip install .
```

Run the tests:

```
pip install .[test]
pytest
```

## Examples

Money:

```python
from zledger.money import Money

amount = Money.parse("123.456")
print(amount)             # 123.456ZSH
print(int(amount))        # 123456000000
print(amount + Money.parse("1"))
```

Merkle proofs:

```python
from zledger.hashing import sha3_hash
from zledger.merkle import MerkleTree, merge_hash

leaves = [sha3_hash(bytes([i])) for i in range(10)]
tree = MerkleTree(leaves)

current = leaves[3]
for sibling in tree.prove(3):
    current = merge_hash(current, sibling)
assert current == tree.root()
```

Signatures:

```python
from zledger import ed25519

verify_key, signer = ed25519.generate_keys(b"secret")
signature = ed25519.sign(signer, b"message")
assert ed25519.verify(verify_key, b"message", signature)
print(verify_key)         # 0x followed by 64 hex digits
```

Curve points:

```python
from zledger.jubjub import BASE

point = BASE.multiply(123)
assert point.compress().decompress() == point
assert BASE.double().double() == BASE + BASE + BASE + BASE
```

Key-value store with a rollback mirror:

```python
from zledger.kvstore import Put, Remove, RamKvStore

store = RamKvStore()
store.update([Put("aa", b"\x01"), Put("bc", b"\x02")])

mirror = store.mirror()
mirror.update([Remove("aa"), Put("dd", b"\x03")])
undo = mirror.rollback()        # operations that restore the store's current values
store.update(mirror.to_ops())   # apply the mirror's changes to the store
```

## What this package does not do

- It has no command-line tool, node, network client or wallet; it is a library only.
- Storage is in memory only: there is no on-disk key-value store.
- `zledger.jubjub` provides curve arithmetic and public-key parsing, but no key generation, signing or verification on that curve.
- There are no block, header or transaction types; `zledger.keys` only builds the key strings for them.