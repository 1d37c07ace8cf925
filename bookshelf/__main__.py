from bookshelf.main import run

run()
