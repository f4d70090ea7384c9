import asyncio
import logging

from config.form import FormConfig
from registration.controller import FormController


async def run_demo(config: FormConfig) -> None:
    controller = FormController(config=config)

    print("courses:", [c.id for c in controller.courses])

    # first attempt: every field wrong
    for name, value in {"name": "A", "email": "bad", "age": 10, "course": ""}.items():
        controller.set_field(name, value)
    await controller.submit()
    print("\nINVALID SUBMIT")
    print("status:", controller.status.value)
    print("errors:", controller.state.errors)

    # second attempt: valid registration
    for name, value in {"name": "Al", "email": "al@x.com", "age": 16, "course": "math"}.items():
        controller.set_field(name, value)
    accepted = await controller.submit()
    print("\nVALID SUBMIT")
    print("accepted:", accepted)
    print("status:", controller.status.value)

    await asyncio.sleep(config.reset_delay + 0.1)
    print("\nAFTER RESET")
    print("status:", controller.status.value)
    print("values:", controller.state.values.model_dump())

    controller.destroy()


def main():
    config = FormConfig.from_env()
    logging.basicConfig(
        level=getattr(logging, config.log_level.upper(), logging.INFO),
        format="%(asctime)s %(levelname)s %(name)s - %(message)s",
    )
    asyncio.run(run_demo(config))


if __name__ == "__main__":
    main()
