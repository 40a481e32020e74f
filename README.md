# palletkit

Small runtime modules ("pallets") that keep their state in memory. They check
who is calling, record events in a shared log and describe what their calls
weigh and cost.

## Installing

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Modules

- `palletkit.runtime` holds the shared pieces.
  - `Origin.signed(who)` and `Origin.root()` build call origins.
  - `ensure_signed(origin)` returns the caller's account, or raises `BadOrigin` for a root origin.
  - `DispatchError` is the base of every error a call raises.
  - `System` keeps a `block_number`. `deposit_event` stores an event as an `EventRecord` with fields `event` and `block_number`, and `events()` returns the records, oldest first.
  - `AccountSet` and `SumStorageApi` are abstract interfaces.
- `palletkit.sum_storage`: `SumStorage` stores `thing1` and `thing2`.
  - `set_thing_1` and `set_thing_2` set them, and each emits `ValueSet(which, value)`.
  - `get_sum()` returns their sum. It raises `OverflowError` when the sum does not fit in a u32.
- `palletkit.storage_cache`: `StorageCache` holds `some_copy_value`, `king_member` (initially `None`) and `group_members`.
  - `increase_value_no_cache` and `increase_value_w_copy` set the value to `2 * value + some_val`. They emit `InefficientValueChange` and `BetterValueChange` respectively.
  - Both raise `DispatchError("addition overflowed1")` or `DispatchError("addition overflowed2")` when a step goes past the u32 maximum.
  - `swap_king_no_cache` and `swap_king_with_cache` make the caller king, but only when the caller is a member and the current king is not. They emit `InefficientKingSwap(old, new)` and `BetterKingSwap(old, new)` respectively.
  - `set_copy`, `set_king`, `mock_add_member` and `is_member` set up and inspect the state.
- `palletkit.struct_storage`: `StructStorage` stores `InnerThing(number, hash, balance)` records and `SuperThing(super_number, inner_thing)` records, each keyed by number.
  - `inner_things_by_numbers` and `super_things_by_super_numbers` return a default record when nothing is stored under the number.
  - The insert calls emit `NewInnerThing`, `NewSuperThingByExistingInner` and `NewSuperThingByNewInner`.
- `palletkit.vec_set`: `VecSet` keeps its members sorted and holds at most `MAX_MEMBERS` (16) of them.
  - `add_member` raises `AlreadyMember` or `MembershipLimitReached`. `remove_member` raises `NotMember`.
  - The calls emit `MemberAdded` and `MemberRemoved`.
  - `members` returns the sorted list and `accounts()` returns a set.
- `palletkit.rpc`: `SumStorageRpc(client).get_sum(at=None)` asks the client for the runtime API at block hash `at`, or at `client.best_hash` when `at` is `None`.
  - Any failure is re-raised as `RpcError` with `code` 9876, `message` `"Something wrong"` and the original error's repr in `data`.
- `palletkit.weights`: the weight scales `Linear(multiplier)`, `Quadratic(a, b, c)` for `a*x^2 + b*y + c`, and `Conditional(multiplier)`.
  - All three saturate at the u32 maximum.
  - Each reports `Pays.YES` and `DispatchClass.NORMAL`.
  - `Weights` holds one `stored_value` and offers `store_value`, `add_n`, `double`, `complex_calculations` and `add_or_set`, with the weight of each as a class attribute.
  - `double` raises `DispatchError` when the stated value does not match storage.
- `palletkit.fees` turns weights into fees.
  - `Perbill` is a fraction in parts per billion.
  - `WeightToFeeCoefficient` is one term of a fee polynomial.
  - `weight_to_fee(coefficients, weight)` applies the terms in order, saturating between 0 and the u128 maximum.
  - `LinearWeightToFee(coefficient)` (default 1000) and `QuadraticWeightToFee()` (`3 w^2 - 2.4 w`) give their terms through `polynomial()` and a fee through `calc(weight)`.
- `palletkit.runtimes`: `ApiRuntime` wires a `System` to a `SumStorage`, available as `.system` and `.sum_storage`.
  - `get_sum()` answers the sum.
  - `version()` returns a `RuntimeVersion` named `"api-runtime"`.
  - It has no session keys: `generate_session_keys` returns `b""` and `decode_session_keys` returns `None`.

## Examples

```python
from palletkit.runtime import Origin, System
from palletkit.sum_storage import SumStorage

system = System()
system.set_block_number(1)
sums = SumStorage(system)

sums.set_thing_1(Origin.signed(1), 42)
sums.set_thing_2(Origin.signed(1), 43)
assert sums.get_sum() == 85
print([record.event for record in system.events()])
```

A call that cannot go ahead raises a `DispatchError` and leaves storage as it
was:

```python
from palletkit.runtime import DispatchError, Origin, System
from palletkit.vec_set import VecSet

members = VecSet(System())
members.add_member(Origin.signed(1))
try:
    members.add_member(Origin.signed(1))
except DispatchError as error:
    print(error)  # already a member
```

Querying through the RPC handler needs a client that has a `best_hash` and a
`runtime_api(at)` method:

```python
from palletkit.rpc import SumStorageRpc
from palletkit.runtime import Origin
from palletkit.runtimes import ApiRuntime

runtime = ApiRuntime()
runtime.sum_storage.set_thing_1(Origin.signed(1), 7)

class Client:
    best_hash = "best"

    def runtime_api(self, at):
        return runtime

print(SumStorageRpc(Client()).get_sum())  # 7
```

Converting a weight to a fee:

```python
from palletkit.fees import LinearWeightToFee, QuadraticWeightToFee

print(LinearWeightToFee(1_000).calc(10))  # 10000
print(QuadraticWeightToFee().calc(10))    # 276
```

## What it does not do

All state lives in Python objects for as long as they exist. The package has:

- no persistent storage;
- no blocks, consensus or transaction pool;
- no genesis configuration;
- no balances, timestamps or fee charging against accounts.

`SumStorageRpc` is a plain handler. It does not open a network server. There
is no command-line program.