from pnl_stats.main import run

run()
