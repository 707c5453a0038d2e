from __future__ import annotations

from _infra import banner, run

from callbackless import flat_map, fmap, lift, lift_a, unit
from kungfu import Error, Ok


async def main() -> None:
    banner("01_quickstart: unit + fmap + flat_map + lift_a")

    doubled = fmap(lambda x: x * 2)(unit(5))
    print("doubled:", doubled.data())

    def half(x: int):
        return unit(x // 2) if x % 2 == 0 else lift.up.failure(f"{x} is odd")

    for start in (doubled, unit(7)):
        match lift.down.to_result(flat_map(half)(start)):
            case Ok(value):
                print("half:", value)
            case Error(err):
                print("error:", err)

    # lift_a never fails: the failed input contributes None
    pair = lift_a(lambda a, b: (a, b))(lift.up.failure("boom"), unit("x"))
    print("pair:", pair.data())


if __name__ == "__main__":
    run(main)
