from subway_routing.main import run

run()
