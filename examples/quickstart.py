from __future__ import annotations


def main() -> None:
    # [START README_QUICKSTART]
    from bs_calculator import (
        DegenerateMarketError,
        DegeneratePolicy,
        compute_option_prices,
        compute_sensitivity_curve,
    )

    res = compute_option_prices(1800.0, 1800.0, 1.0, 30.0, 20.0)
    for name, value in res.as_dict().items():
        print(f"{name}: {value:.4f}")

    curve = compute_sensitivity_curve(1800.0, 1800.0, 1.0, 30.0, 20.0)
    print(curve.to_frame())

    try:
        compute_option_prices(1800.0, 1800.0, 1.0, 30.0, 0.0)
    except DegenerateMarketError as e:
        print("degenerate:", e)

    print(
        "intrinsic:",
        compute_option_prices(
            1900.0, 1800.0, 1.0, 30.0, 0.0, policy=DegeneratePolicy.INTRINSIC
        ).call_price,
    )
    # [END README_QUICKSTART]


if __name__ == "__main__":
    main()
