"""Basic usage example."""

from fleep_notify import StepConfig, build_payload, run_step
from fleep_notify.console import setup_logging


def main():
    setup_logging(debug=True)

    config = StepConfig(
        webhook_url="https://fleep.io/hook/REPLACE_ME",
        from_username="ci-bot",
        message="Build finished\\nAll tests passed",
        is_build_failed=False,
    )

    # Inspect what would be sent
    payload = build_payload(config)
    print(payload.to_json().decode("utf-8"))

    # Send it
    response = run_step(config, timeout=10)
    print(f"Fleep answered {response.status_code}: {response.body}")


if __name__ == "__main__":
    main()
