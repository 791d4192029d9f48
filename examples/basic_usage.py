# python
import logging

from config_params import ConfigContext, Int32Parameter, StringParameter, valid_range

if __name__ == "__main__":
    logging.basicConfig(level=logging.DEBUG)

    context = ConfigContext()
    retries = Int32Parameter(
        "Retries",
        default=3,
        validator=valid_range(0, 10),
        description="Number of times to retry a failed request",
        context=context,
    )
    host = StringParameter("Host", default="localhost", context=context)

    print("Default:", retries.value, host.value)
    print("Validate 42:", retries.validate(42))
    retries.set_value(5)
    print("Updated:", retries.value)
