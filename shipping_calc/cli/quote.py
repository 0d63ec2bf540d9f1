# shipping_calc/cli/quote.py
import logging
import sys

import click
from dotenv import load_dotenv

from shipping_calc.core.config import get_settings
from shipping_calc.core.exceptions import ShippingCalcError
from shipping_calc.core.logging_config import configure_logging
from shipping_calc.services.shipping.data import DHL_SERVICE_CODES, DHL_SHIPMENT_CODES, FREIGHTQUOTE_CONDITIONS
from shipping_calc.services.shipping.factory import get_carrier

logger = logging.getLogger(__name__)


def _setting(name):
    """Lazy option default read from Settings (environment / .env)."""
    return lambda: getattr(get_settings(), name) or None


def _run_quote(carrier_code, params):
    carrier = get_carrier(carrier_code)
    try:
        return carrier.quote(params)
    except ShippingCalcError as e:
        logger.debug(f"{carrier.carrier_name} quote failed", exc_info=True)
        raise click.ClickException(str(e))


@click.group()
@click.option('--log-level', default=None, help='Overrides LOG_LEVEL')
def cli(log_level):
    """Shipping quotes from DHL and Freightquote."""
    load_dotenv()
    configure_logging(log_level)


@cli.command()
@click.option('--api-user', default=_setting('DHL_API_USER'), required=True, help='DHL API username')
@click.option('--api-password', default=_setting('DHL_API_PASSWORD'), required=True, help='DHL API password')
@click.option('--shipping-key', default=_setting('DHL_SHIPPING_KEY'), required=True, help='DHL shipping key')
@click.option('--account-num', default=_setting('DHL_ACCOUNT_NUM'), required=True, help='DHL account number')
@click.option('--date', 'ship_date', default=None, help='Ship date YYYY-MM-DD (defaults to today)')
@click.option('--service-code', type=click.Choice(sorted(DHL_SERVICE_CODES)), default='G', show_default=True)
@click.option('--shipment-code', type=click.Choice(sorted(DHL_SHIPMENT_CODES)), default='P', show_default=True)
@click.option('--weight', type=float, required=True, help='Weight in lbs')
@click.option('--to-zip', type=int, required=True, help="Recipient's 5 digit zip code")
@click.option('--to-state', required=True, help="Recipient's state, e.g. NY")
def dhl(api_user, api_password, shipping_key, account_num, ship_date, service_code, shipment_code,
        weight, to_zip, to_state):
    """Get a DHL rate estimate."""
    params = {
        'api_user': api_user,
        'api_password': api_password,
        'shipping_key': shipping_key,
        'account_num': account_num,
        'date': ship_date,
        'service_code': service_code,
        'shipment_code': shipment_code,
        'weight': weight,
        'to_zip': to_zip,
        'to_state': to_state.upper(),
    }
    price = _run_quote('dhl', params)
    click.echo(f"Quote: {price}")


@cli.command()
@click.option('--api-email', default=_setting('FREIGHTQUOTE_EMAIL'), required=True, help='Freightquote API email')
@click.option('--api-password', default=_setting('FREIGHTQUOTE_PASSWORD'), required=True, help='Freightquote API password')
@click.option('--from-zip', required=True, help="Sender's zip code")
@click.option('--to-zip', required=True, help="Recipient's zip code")
@click.option('--weight', type=float, required=True, help='Total weight in lbs')
@click.option('--dimensions', default=None, help='LengthxWidthxHeight, e.g. 23x32x15')
@click.option('--freight-class', type=float, default=None, help='Freight class, wins over --dimensions')
@click.option('--description', default=None, help='Description of the goods')
@click.option('--from-conditions', type=click.Choice(sorted(FREIGHTQUOTE_CONDITIONS)), default=None)
@click.option('--to-conditions', type=click.Choice(sorted(FREIGHTQUOTE_CONDITIONS)), default=None)
@click.option('--liftgate', is_flag=True, help='Liftgate needed at the receiving location')
@click.option('--inside-delivery', is_flag=True, help='Inside delivery needed at the receiving location')
def freightquote(api_email, api_password, from_zip, to_zip, weight, dimensions, freight_class, description,
                 from_conditions, to_conditions, liftgate, inside_delivery):
    """Get freight quotes from every Freightquote carrier."""
    params = {
        'api_email': api_email,
        'api_password': api_password,
        'from_zip': from_zip,
        'to_zip': to_zip,
        'weight': weight,
        'dimensions': dimensions,
        'class': freight_class,
        'description': description,
        'from_conditions': from_conditions,
        'to_conditions': to_conditions,
        'liftgate': liftgate,
        'inside_delivery': inside_delivery,
    }
    quotes = _run_quote('freightquote', params)
    if not quotes:
        click.echo("No quotes returned", err=True)
        sys.exit(1)
    for name, rate in quotes.items():
        click.echo(f"{name} - {rate}")


if __name__ == '__main__':
    cli()
