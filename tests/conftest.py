import pytest

TOKEN_IN = "0x0555e30da8f98308edb960aa94c0db47230d2b9c"
TOKEN_OUT = "0x657e8c867d8b37dcc18fa4caead9c45eb088c642"
RECEIVER = "0xed63e871f5de87cb1919671ee9e2d331183eda8f"
ROUTER = "0xfd88ad4b5d1b5d2b9e2e40c9b1e3f6a3e5c5b2d1"
EXECUTOR = "0x1111111111111111111111111111111111111111"


@pytest.fixture
def swap_payload():
    return {
        "status": "Success",
        "assumedAmountOut": "99500000",
        "tx": {
            "from": RECEIVER,
            "to": ROUTER,
            "data": "0xdeadbeef",
            "value": "0x0",
        },
        "routerParams": {
            "swapTokenInfo": {
                "inputToken": TOKEN_IN,
                "inputAmount": "100000000",
                "outputToken": TOKEN_OUT,
                "outputQuote": "99500000",
                "outputMin": "98505000",
                "outputReceiver": RECEIVER,
            },
            "pathDefinition": "0x01",
            "executor": EXECUTOR,
            "referralCode": 0,
        },
        "routerAddr": ROUTER,
    }
