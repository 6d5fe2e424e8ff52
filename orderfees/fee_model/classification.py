"""
Maker/taker classification of orders.

The decision only looks at the order type, the post-only flag and the
limit price against the prevailing quote, so it is kept apart from the
fee arithmetic.
"""

from decimal import Decimal
from typing import Optional

from orderfees.core.enums import OrderClassification, OrderDirection, OrderType
from orderfees.core.exceptions import MissingPriceDataError, UnsupportedOrderTypeError
from orderfees.orders import Order
from .context import OrderFeeContext


def _require_price(price: Optional[Decimal], symbol: str, price_field: str, order: Order) -> Decimal:
    if price is None or price <= 0:
        raise MissingPriceDataError(symbol, price_field, order.id)
    return price


def classify_order(
    order: Order,
    bid_price: Optional[Decimal],
    ask_price: Optional[Decimal],
    fee_model: str = "FeeModel"
) -> OrderClassification:
    """
    Decide whether an order provides or removes liquidity.

    Parameters
    ----------
    order : Order
        The order to classify
    bid_price, ask_price : Decimal
        Prevailing quote; only the side opposite to the order is used
    fee_model : str
        Name reported in errors

    Returns
    -------
    OrderClassification
        MARKET and LIMIT_CROSSING take liquidity, LIMIT_POST_ONLY and
        LIMIT_RESTING make it

    Raises
    ------
    UnsupportedOrderTypeError
        For order types other than market and limit
    MissingPriceDataError
        If the opposite side of the quote is needed but unavailable
    """
    if order.type is OrderType.MARKET:
        return OrderClassification.MARKET

    if order.type is not OrderType.LIMIT:
        raise UnsupportedOrderTypeError(order.type, fee_model, order.id)

    # The venue rejects or reprices a post-only order rather than letting it take
    if order.properties.post_only:
        return OrderClassification.LIMIT_POST_ONLY

    if order.direction is OrderDirection.BUY:
        ask = _require_price(ask_price, order.symbol, "ask", order)
        crosses = order.limit_price >= ask
    else:
        bid = _require_price(bid_price, order.symbol, "bid", order)
        crosses = order.limit_price <= bid

    if crosses:
        return OrderClassification.LIMIT_CROSSING
    return OrderClassification.LIMIT_RESTING


def reference_price(context: OrderFeeContext, fee_model: str = "FeeModel") -> Decimal:
    """
    Price the fee rate is applied to.

    Limit orders use their own limit price. Market orders use the side of
    the prevailing quote they would fill against: the ask for a buy, the
    bid for a sell.

    Raises
    ------
    UnsupportedOrderTypeError
        For order types other than market and limit
    MissingPriceDataError
        If a market order has no quote to fill against
    """
    order = context.order

    if order.type is OrderType.LIMIT:
        return order.limit_price

    if order.type is not OrderType.MARKET:
        raise UnsupportedOrderTypeError(order.type, fee_model, order.id)

    bid_price, ask_price = context.prevailing_quote()
    if order.direction is OrderDirection.BUY:
        return _require_price(ask_price, order.symbol, "ask", order)
    return _require_price(bid_price, order.symbol, "bid", order)
