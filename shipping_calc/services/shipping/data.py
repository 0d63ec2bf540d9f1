"""
Common shipping data structures for use across the carrier integrations
"""

# US region codes accepted as a recipient state (50 states + DC).
# Only shipments inside the US are supported.
US_STATES = frozenset({
    'AK', 'AL', 'AR', 'AZ', 'CA', 'CO', 'CT', 'DC',
    'DE', 'FL', 'GA', 'HI', 'IA', 'ID', 'IL', 'IN',
    'KS', 'KY', 'LA', 'MA', 'MD', 'ME', 'MI', 'MN',
    'MO', 'MS', 'MT', 'NC', 'ND', 'NE', 'NH', 'NJ',
    'NM', 'NV', 'NY', 'OH', 'OK', 'OR', 'PA', 'RI',
    'SC', 'SD', 'TN', 'TX', 'UT', 'VA', 'VT', 'WA',
    'WI', 'WV',
})

# DHL Rate Estimate service codes
# 1030 and SAT are not supported yet
DHL_SERVICE_CODES = {
    'E': 'Express',
    'N': 'Next Afternoon',
    'S': 'Second Day',
    'G': 'Ground',
}
DHL_DEFAULT_SERVICE_CODE = 'G'

# DHL ShipmentType codes
DHL_SHIPMENT_CODES = {
    'P': 'Package',
    'L': 'Letter',
}
DHL_DEFAULT_SHIPMENT_CODE = 'P'
DHL_LETTER_CODE = 'L'

DHL_MAX_WEIGHT_LBS = 150
DHL_BILLING_PARTY = 'S'  # sender pays
DHL_SUCCESS_DESC = "Shipment estimate successful."

# DHL fault codes -> the request field they complain about.
# Inclusive ranges, checked top to bottom, first match wins.
# Special Services and Additional Protection are not supported.
DHL_FAULT_CATEGORIES = (
    (1000, 1009, "Shipment Headers"),
    (4000, 4004, "ShippingKey"),
    (4007, 4007, "Account Number"),
    (4195, 4198, "Account Number"),
    (4100, 4106, "Shipment Date"),
    (4108, 4117, "Service Type (Code)"),
    (4118, 4122, "Shipment Type Code"),
    (4123, 4124, "Weight"),
    (4128, 4131, "Dimensions"),
    (4116, 4116, "Billing Party (Code)"),  # shadowed by 4108-4117
    (4147, 4147, "Billing Party (Code)"),
    (4149, 4152, "Billing Account Number"),
    (4164, 4166, "Receiver City"),
    (4167, 4167, "Receiver State"),
    (4164, 4166, "Receiver City"),
    (4169, 4169, "Receiver Country"),
    (4170, 4176, "Receiver Postal Code"),
)
DHL_DEFAULT_FAULT_CATEGORY = "API Request"

# Freightquote location conditions -> (element, text)
FREIGHTQUOTE_CONDITIONS = {
    'RES': ('RESIDENCE', 'TRUE'),             # residence
    'BIZ_WITH': ('LOADINGDOCK', 'TRUE'),      # business with a forklift or dock
    'BIZ_WITHOUT': ('LOADINGDOCK', 'FALSE'),  # business without a forklift or dock
}
FREIGHTQUOTE_DEFAULT_CONDITIONS = 'RES'
FREIGHTQUOTE_DEFAULT_DESCRIPTION = 'NODESC'
FREIGHTQUOTE_BILL_TO = 'SHIPPER'
FREIGHTQUOTE_PIECES = 1
FREIGHTQUOTE_REQUIRED_FIELDS = ('api_email', 'api_password', 'to_zip', 'from_zip', 'weight')
