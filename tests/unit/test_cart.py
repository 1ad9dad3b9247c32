"""
Cart 的四个修改操作和合计计算。
"""
import pytest

from medassist.exceptions import ValidationError
from medassist.shopping import Cart, Price
from tests.conftest import CartItemFactory


class TestAddToCart:

    def test_new_item_appended_with_quantity_one(self):
        cart = Cart()
        cart.add_to_cart(CartItemFactory(id='med-0'))

        assert [item.id for item in cart.items] == ['med-0']
        assert cart.get('med-0').quantity == 1

    def test_same_id_twice_increments_quantity(self):
        cart = Cart()
        item = CartItemFactory(id='med-0')

        cart.add_to_cart(item)
        cart.add_to_cart(item)

        assert len(cart) == 1
        assert cart.get('med-0').quantity == 2

    def test_incoming_quantity_ignored_for_existing_item(self):
        cart = Cart()
        cart.add_to_cart(CartItemFactory(id='med-0'))
        cart.add_to_cart(CartItemFactory(id='med-0', quantity=5))

        assert cart.get('med-0').quantity == 2

    def test_non_positive_quantity_is_normalized(self):
        cart = Cart()
        cart.add_to_cart(CartItemFactory(id='med-0', quantity=0))

        assert cart.get('med-0').quantity == 1

    def test_caller_copy_is_not_shared(self):
        cart = Cart()
        item = CartItemFactory(id='med-0')
        cart.add_to_cart(item)

        item.quantity = 9
        cart.items[0].quantity = 7

        assert cart.get('med-0').quantity == 1


class TestRemoveAndUpdate:

    def test_remove(self):
        cart = Cart([CartItemFactory(id='med-0'), CartItemFactory(id='food-0')])
        cart.remove_from_cart('med-0')

        assert [item.id for item in cart] == ['food-0']

    def test_remove_absent_id_is_noop(self):
        cart = Cart([CartItemFactory(id='med-0')])
        cart.remove_from_cart('nope')

        assert len(cart) == 1

    def test_update_sets_exact_quantity(self):
        cart = Cart([CartItemFactory(id='med-0')])
        cart.update_quantity('med-0', 4)

        assert cart.get('med-0').quantity == 4

    @pytest.mark.parametrize('quantity', [0, -2])
    def test_update_to_non_positive_equals_remove(self, quantity):
        items = [CartItemFactory(id='med-0'), CartItemFactory(id='food-0')]
        updated = Cart(items)
        removed = Cart(items)

        updated.update_quantity('med-0', quantity)
        removed.remove_from_cart('med-0')

        assert updated.items == removed.items

    def test_update_absent_id_is_noop(self):
        cart = Cart([CartItemFactory(id='med-0')])
        cart.update_quantity('nope', 3)

        assert cart.get('nope') is None
        assert cart.get('med-0').quantity == 1

    def test_clear(self):
        cart = Cart([CartItemFactory(), CartItemFactory()])
        cart.clear_cart()

        assert cart.is_empty()
        assert cart.get_total_price('naira') == 0


class TestTotals:

    def test_quantity_change_scales_line_total(self):
        cart = Cart([CartItemFactory(id='med-0', price=Price(naira=2000, dollar=20))])
        assert cart.get_total_price('naira') == 2000

        cart.update_quantity('med-0', 3)

        assert cart.get_total_price('naira') == 6000
        assert cart.get_total_price('dollar') == 60

    def test_total_is_sum_of_lines(self):
        cart = Cart([
            CartItemFactory(id='med-0', price=Price(naira=2500, dollar=25)),
            CartItemFactory(id='food-0', price=Price(naira=999, dollar=9)),
        ])
        cart.update_quantity('food-0', 3)

        assert cart.get_total_price('naira') == 2500 + 999 * 3
        assert isinstance(cart.get_total_price('naira'), int)

    def test_empty_cart_total_is_zero(self):
        assert Cart().get_total_price('dollar') == 0

    def test_unknown_currency(self):
        with pytest.raises(ValidationError) as exc_info:
            Cart().get_total_price('euro')

        assert exc_info.value.code == 'UNKNOWN_CURRENCY'
