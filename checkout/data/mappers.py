"""Static mappers for domain entities ↔ database models."""

from decimal import Decimal
from typing import Iterable, List

from checkout.domain.entities import Customer, Order, OrderItem, Product
from checkout.domain.value_objects import Address

from .models import CustomerModel, OrderItemModel, OrderModel, ProductModel


class OrderItemMapper:
    """Static mapper for OrderItem ↔ OrderItemModel transformation."""

    @staticmethod
    def to_domain(model: OrderItemModel) -> OrderItem:
        """Convert ORM model to domain entity.

        Args:
            model: OrderItemModel instance

        Returns:
            OrderItem domain entity
        """
        return OrderItem(
            id=model.id,
            name=model.name,
            price=Decimal(str(model.price)),
            product_id=model.product_id,
            quantity=int(model.quantity),
        )

    @staticmethod
    def to_persistence(entity: OrderItem, order_id: str, position: int) -> OrderItemModel:
        """Convert domain entity to ORM model.

        Args:
            entity: OrderItem domain entity
            order_id: Id of the owning order
            position: Index of the item inside the order

        Returns:
            OrderItemModel instance
        """
        return OrderItemModel(
            id=entity.id,
            order_id=order_id,
            product_id=entity.product_id,
            name=entity.name,
            price=entity.price,
            quantity=entity.quantity,
            position=position,
        )


class OrderMapper:
    """Static mapper for Order ↔ OrderModel transformation with nested items."""

    @staticmethod
    def to_domain(model: OrderModel, item_models: Iterable[OrderItemModel]) -> Order:
        """Convert an order row and its item rows to the domain aggregate.

        Args:
            model: OrderModel instance
            item_models: Item rows of this order, already in position order

        Returns:
            Order domain aggregate
        """
        items = [OrderItemMapper.to_domain(item_model) for item_model in item_models]

        return Order(id=model.id, customer_id=model.customer_id, items=items)

    @staticmethod
    def to_persistence(entity: Order) -> OrderModel:
        """Convert domain aggregate to its order row (items are mapped separately).

        Args:
            entity: Order domain aggregate

        Returns:
            OrderModel instance
        """
        return OrderModel(
            id=entity.id,
            customer_id=entity.customer_id,
            total=entity.total(),
        )

    @staticmethod
    def items_to_persistence(entity: Order) -> List[OrderItemModel]:
        """Convert the aggregate's items to rows, numbering them in list order."""
        return [
            OrderItemMapper.to_persistence(item, entity.id, position)
            for position, item in enumerate(entity.items)
        ]

    @staticmethod
    def update_persistence(entity: Order, model: OrderModel) -> OrderModel:
        """Update existing order row from domain entity (for updates).

        Args:
            entity: Order domain aggregate
            model: Existing OrderModel instance

        Returns:
            Updated OrderModel instance
        """
        model.customer_id = entity.customer_id
        model.total = entity.total()
        return model


class CustomerMapper:
    """Static mapper for Customer ↔ CustomerModel transformation."""

    @staticmethod
    def to_domain(model: CustomerModel) -> Customer:
        address = None
        if model.street is not None:
            address = Address(
                street=model.street,
                number=model.number,
                zipcode=model.zipcode,
                city=model.city,
            )

        return Customer(
            id=model.id,
            name=model.name,
            address=address,
            active=bool(model.active),
            reward_points=Decimal(str(model.reward_points)),
        )

    @staticmethod
    def to_persistence(entity: Customer) -> CustomerModel:
        model = CustomerModel(id=entity.id)
        return CustomerMapper.update_persistence(entity, model)

    @staticmethod
    def update_persistence(entity: Customer, model: CustomerModel) -> CustomerModel:
        address = entity.address
        model.name = entity.name
        model.street = address.street if address else None
        model.number = address.number if address else None
        model.zipcode = address.zipcode if address else None
        model.city = address.city if address else None
        model.active = entity.active
        model.reward_points = entity.reward_points
        return model


class ProductMapper:
    """Static mapper for Product ↔ ProductModel transformation."""

    @staticmethod
    def to_domain(model: ProductModel) -> Product:
        return Product(id=model.id, name=model.name, price=Decimal(str(model.price)))

    @staticmethod
    def to_persistence(entity: Product) -> ProductModel:
        return ProductModel(id=entity.id, name=entity.name, price=entity.price)

    @staticmethod
    def update_persistence(entity: Product, model: ProductModel) -> ProductModel:
        model.name = entity.name
        model.price = entity.price
        return model
