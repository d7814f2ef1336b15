from config import ApplicationConfig

# Cheap bcrypt rounds keep the suite fast; production uses the configured cost
ApplicationConfig.BCRYPT_ROUNDS = 4
