# Simulation timing
FRAMES_PER_SECOND = 30
SIMULATION_FRAMES = 150  # 5 seconds at 30 FPS
SIMULATION_WINDOW_SECONDS = 5.0

# Burst gauge
BURST_THRESHOLD = 100.0
TEAM_SIZE = 5

# Weapon tags whose burst generation depends on reload time
RELOAD_WEAPON_TAGS = ("RL", "SR")
