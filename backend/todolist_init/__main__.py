from todolist_init.main import run

run()
