from __future__ import annotations

from _infra import banner, fetch_user, run, timer_promise

from callbackless import continue_, fmap, is_success, lift, sequence
from kungfu import Error, Ok


async def main() -> None:
    banner("02_producers: promises settled by timer threads")

    names = fmap(lambda users: [u.name for u in users])(sequence([fetch_user(1), fetch_user(2)]))
    match await lift.down.wait(names):
        case Ok(value):
            print("names:", value)
        case Error(err):
            print("error:", err)

    missing = fetch_user(-1)
    print("found:", (await lift.down.wait(is_success(missing))).unwrap())

    # Steps run one after another whatever each outcome was
    step1 = timer_promise(0.01, "step 1")
    step2 = continue_(step1, lambda p: print(p.data()) or missing)
    step3 = continue_(step2, lambda p: print("step 2 failed:", p.state().value) or None)
    await lift.down.wait(step3)


if __name__ == "__main__":
    run(main)
