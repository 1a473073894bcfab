"""Hello casewise - classifying integers.

Cases are tried in order; the first one whose predicate accepts the value
wins. A default is used only when nothing else matched.

    -3  -> neg
     5  -> five
    100 -> other
"""

from casewise import by_default, by_predicate, match, unwrap


def classify(n: int) -> str:
    return unwrap(
        match(n).of(
            by_predicate(lambda v: v < 0, lambda _: "neg"),
            by_predicate(lambda v: v == 5, lambda _: "five"),
            by_default(lambda: "other"),
        )
    )


if __name__ == "__main__":
    for n in (-3, 5, 100):
        print(f"{n:>4} -> {classify(n)}")
