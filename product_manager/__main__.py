from product_manager.main import run

run()
