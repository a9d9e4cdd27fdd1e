"""
tests/test_foods.py – Unit tests cho FoodService (SQLite tạm).
Kịch bản: phân trang, top theo order_count, lọc theo buyer, CRUD chỉ cho người bán.
"""
import pytest

from market_api.core.errors import ForbiddenError, NotFoundError
from market_api.models import FoodCreate, FoodUpdate


class TestRead:

    @pytest.mark.asyncio
    async def test_pagination(self, food_service, add_food):
        ids = [add_food(food_name=f"Món {i}") for i in range(1, 8)]

        first = await food_service.list_page(page=1, size=3)
        third = await food_service.list_page(page=3, size=3)
        assert [f.id for f in first] == ids[:3]
        assert [f.id for f in third] == ids[6:]

    @pytest.mark.asyncio
    async def test_page_past_end_is_empty(self, food_service, add_food):
        add_food()
        assert await food_service.list_page(page=5, size=10) == []

    @pytest.mark.asyncio
    async def test_count(self, food_service, add_food):
        assert await food_service.count() == 0
        add_food()
        add_food()
        assert await food_service.count() == 2

    @pytest.mark.asyncio
    async def test_get(self, food_service, add_food):
        food_id = add_food(food_name="Bánh mì", quantity=4)
        food = await food_service.get(food_id)
        assert food.food_name == "Bánh mì"
        assert food.quantity == 4
        assert food.seller_email == "s@x.com"

    @pytest.mark.asyncio
    async def test_get_missing(self, food_service):
        with pytest.raises(NotFoundError):
            await food_service.get(123)

    @pytest.mark.asyncio
    async def test_top_sorted_by_order_count(self, food_service, add_food):
        for count in [1, 9, 3, 7, 0, 5, 8, 2]:
            add_food(food_name=f"c{count}", order_count=count)

        top = await food_service.top()
        assert len(top) == 6
        assert [f.order_count for f in top] == [9, 8, 7, 5, 3, 2]

    @pytest.mark.asyncio
    async def test_list_by_buyer(self, food_service, add_food):
        mine = add_food(buyer_email="b@x.com")
        add_food(buyer_email="c@x.com")
        add_food()

        foods = await food_service.list_by_buyer("b@x.com")
        assert [f.id for f in foods] == [mine]


class TestCreate:

    @pytest.mark.asyncio
    async def test_seller_defaults_to_caller(self, food_service, seller):
        food_id = await food_service.create(FoodCreate(food_name="Cơm tấm", quantity=5, price=3), seller)
        food = await food_service.get(food_id)
        assert food.seller_email == "s@x.com"
        assert food.order_count == 0
        assert food.quantity == 5

    @pytest.mark.asyncio
    async def test_cannot_create_for_someone_else(self, food_service, buyer):
        with pytest.raises(ForbiddenError):
            await food_service.create(FoodCreate(food_name="Cơm tấm", seller_email="s@x.com"), buyer)


class TestUpdate:

    @pytest.mark.asyncio
    async def test_partial_update(self, food_service, add_food, seller):
        food_id = add_food(price=5.5, quantity=10)

        matched, modified = await food_service.update(food_id, FoodUpdate(price=7.0), seller)
        assert (matched, modified) == (1, 1)
        food = await food_service.get(food_id)
        assert food.price == 7.0
        assert food.quantity == 10

    @pytest.mark.asyncio
    async def test_identifier_is_stripped(self, food_service, add_food, seller):
        food_id = add_food()
        patch = FoodUpdate.model_validate({"id": 999, "_id": 999, "quantity": 4})

        await food_service.update(food_id, patch, seller)
        food = await food_service.get(food_id)
        assert food.id == food_id
        assert food.quantity == 4

    @pytest.mark.asyncio
    async def test_same_values_not_modified(self, food_service, add_food, seller):
        food_id = add_food(price=5.5)
        assert await food_service.update(food_id, FoodUpdate(price=5.5), seller) == (1, 0)

    @pytest.mark.asyncio
    async def test_null_fields_ignored(self, food_service, add_food, seller):
        food_id = add_food(quantity=10)
        await food_service.update(food_id, FoodUpdate(quantity=None, food_name="Mới"), seller)
        food = await food_service.get(food_id)
        assert food.quantity == 10
        assert food.food_name == "Mới"

    @pytest.mark.asyncio
    async def test_missing_food_matches_nothing(self, food_service, seller):
        assert await food_service.update(77, FoodUpdate(price=1), seller) == (0, 0)

    @pytest.mark.asyncio
    async def test_only_seller_can_update(self, food_service, add_food, buyer):
        food_id = add_food()
        with pytest.raises(ForbiddenError):
            await food_service.update(food_id, FoodUpdate(price=1), buyer)

    def test_negative_quantity_invalid(self):
        with pytest.raises(ValueError):
            FoodUpdate(quantity=-1)


class TestDelete:

    @pytest.mark.asyncio
    async def test_delete(self, food_service, add_food, seller):
        food_id = add_food()
        assert await food_service.delete(food_id, seller) == 1
        assert await food_service.count() == 0

    @pytest.mark.asyncio
    async def test_delete_missing(self, food_service, seller):
        assert await food_service.delete(5, seller) == 0

    @pytest.mark.asyncio
    async def test_only_seller_can_delete(self, food_service, add_food, buyer):
        food_id = add_food()
        with pytest.raises(ForbiddenError):
            await food_service.delete(food_id, buyer)
        assert await food_service.count() == 1
