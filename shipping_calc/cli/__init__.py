from shipping_calc.cli.quote import cli
