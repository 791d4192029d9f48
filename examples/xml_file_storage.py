# python
import logging
import sys
from datetime import timedelta

from config_params import ConfigContext, Int32Parameter, TimeSpanParameter, xml_storage

if __name__ == "__main__":
    logging.basicConfig(level=logging.DEBUG)
    path = sys.argv[1] if len(sys.argv) > 1 else "app.config"

    context = ConfigContext(xml_storage(path))
    context.refresh()

    workers = Int32Parameter("Workers", default=4, context=context)
    timeout = TimeSpanParameter("Timeout", default=timedelta(seconds=30), context=context)
    print("Workers:", workers.value, "Timeout:", timeout.get_value_text())

    workers.set_value(workers.value + 1)
    context.flush()
    print("Saved Workers =", workers.value, "to", path)
