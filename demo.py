from services.catalog_service import create_item
from services.customer_service import create_user
from services.cart_service import (
    add_to_cart,
    remove_from_cart,
    remove_quantity_from_cart,
    cart_total,
    print_cart,
)
from utils.formatters import money
from utils.logger import setup_logger


def main():
    logger = setup_logger()

    me = create_user("Matt", 39)
    items_to_sell = [
        create_item("YuGiOh Cards", 5.99,
                    "Konami trying to make money through legal gambling directed towards kids and childish adults"),
        create_item("Super Nintendo Switch", 449.99,
                    "Nintendo's sequel to the ever popular Nintendo Switch; coming to a store near you March 2024"),
        create_item("Outrageous", 2.50,
                    "Matt's favorite Reese's product; for some reason it is only sold in King size whenever he is able to find it"),
    ]

    def show():
        print_cart(me)
        logger.info("The cart total is %s", money(cart_total(me)))

    add_to_cart(items_to_sell[0], me)
    show()

    for item in items_to_sell:
        add_to_cart(item, me)
    show()

    for item in items_to_sell:
        remove_from_cart(item, me)
    show()

    for _ in range(3):
        add_to_cart(items_to_sell[2], me)
    remove_quantity_from_cart(items_to_sell[2], me, 2)
    show()

    return me


if __name__ == "__main__":
    main()
