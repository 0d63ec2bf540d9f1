from .dhl import DHLCarrier, DHLQuoteRequest
from .freight_quote import FreightQuoteCarrier, FreightQuoteRequest
