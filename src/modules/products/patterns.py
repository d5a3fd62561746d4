"""Message patterns (Celery task names) of the product RPC transport."""

CREATE_PRODUCT = "products.create_product"
FIND_ALL_PRODUCTS = "products.find_all_products"
FIND_ONE_PRODUCT = "products.find_one_product"
UPDATE_PRODUCT = "products.update_product"
DELETE_PRODUCT = "products.delete_product"
VALIDATE_PRODUCTS = "products.validate_products"
