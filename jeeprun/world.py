"""The game world: setting up, steering and advancing every object in play."""

from __future__ import annotations

import math
import random
from dataclasses import dataclass
from enum import Enum, IntEnum

import numpy as np

from jeeprun.actors import (
    CollectibleGameObject,
    EndGoalObject,
    Outcome,
    WeaklingObject,
)
from jeeprun.enemies import (
    EnemyGameObject,
    KamikazeEnemyObject,
    RangedEnemyObject,
    WanderingEnemyObject,
)
from jeeprun.game_object import (
    BLOOD_DURATION,
    BackgroundGameObject,
    Blood,
    Collider,
    Explosion,
    GameObject,
    _translation,
)
from jeeprun.geometry import BloodParticles, Particles, Sprite
from jeeprun.hud import HUD, DrawingGameObject, TextGameObject
from jeeprun.particle_system import ParticleSystem
from jeeprun.player import GunMode, Pointer, PlayerGameObject
from jeeprun.projectiles import (
    BulletProjectile,
    EnemyProjectileObject,
    MissileProjectile,
    ProjectileGameObject,
)
from jeeprun.timer import Timer, now

HALF_PI = math.pi / 2.0

# The last objects in the list (the background and the one before it) take no
# part in collision checks.
BACKGROUND_OBJECTS = 2

SPAWN_INTERVAL = 2.0
ENEMY_SHOOT_INTERVAL = 2.0
EFFECT_DURATION = 1.0
PARTICLE_COUNT = 4000
BLOOD_PARTICLE_COUNT = 64
CAMERA_ZOOM = 0.2

EXPLOSION_DAMAGE = 10.0
EXPLOSION_RADIUS = 1.5

SPRITE_SHADER = "sprite"
EXPLOSION_SHADER = "explosion"
BLOOD_SHADER = "blood"
DRAWING_SHADER = "drawing"
TEXT_SHADER = "text"


class Texture(IntEnum):
    """Indices of the textures the game loads, in loading order."""

    JEEP = 0
    KAMIKAZE = 1
    RANGED = 2
    STARS = 3
    ORB = 4
    EXPLOSION = 5
    INVINCIBLE = 6
    FIREBALL = 7
    BULLET = 8
    MISSILE = 9
    NOTHING = 10
    SQUARE = 11
    HEALTH = 12
    BULLET_AMMO = 13
    YELLOW_ORB = 14
    TEXT = 15
    WANDERER = 16
    BARREL = 17
    ROCKET = 18
    BOAT = 19
    WEAKLING = 20


TEXTURE_FILES: tuple[str, ...] = (
    "/textures/jeep_trailcat.png",
    "/textures/ZombieToast.png",
    "/textures/gun.png",
    "/textures/desert.png",
    "/textures/orb.png",
    "/textures/Explosion.png",
    "/textures/turret_01_mk1.png",
    "/textures/FireBall.png",
    "/textures/bullet.png",
    "/textures/roc.png",
    "/textures/nothing.png",
    "/textures/square.png",
    "/textures/health-red 32px.png",
    "/textures/ammo-rifle 32px.png",
    "/textures/invincibility.png",
    "/textures/font.png",
    "/textures/idle.png",
    "/textures/barrel_01_mk1.png",
    "/textures/rocket_01_mk1.png",
    "/textures/boat.png",
    "/textures/weakling.png",
)


@dataclass
class Controls:
    """Which inputs are held down during one frame."""

    forward: bool = False
    backward: bool = False
    turn_right: bool = False
    turn_left: bool = False
    select_bullets: bool = False
    select_missiles: bool = False
    fire: bool = False
    quit: bool = False


class _Flow(Enum):
    CONTINUE = 0
    BREAK = 1
    STOP = 2


class World:
    """All game objects and the rules that make them interact."""

    def __init__(self, pointer=None, rng=None, clock=None) -> None:
        self.pointer = pointer if pointer is not None else Pointer()
        self._rng = rng if rng is not None else random.Random()
        self._clock = clock if clock is not None else now
        self.sprite = Sprite()
        self.sprite.create_geometry()
        self.particles = Particles(self._rng)
        self.particles.create_geometry(PARTICLE_COUNT)
        self.blood_particles = BloodParticles(self._rng)
        self.blood_particles.create_geometry(BLOOD_PARTICLE_COUNT)
        self.objects: list[GameObject] = []
        self.particle_systems: list[ParticleSystem] = []
        self.hud: HUD | None = None
        self.end_goal: EndGoalObject | None = None
        self.spawn_timer = Timer(self._clock)
        self.closed = False
        self.messages: list[str] = []

    @property
    def player(self) -> PlayerGameObject:
        """The player, always the first object."""
        return self.objects[0]

    def _own(self, obj: GameObject) -> GameObject:
        obj.timer = Timer(self._clock)
        return obj

    def _close(self, message: str) -> None:
        self.messages.append(message)
        self.closed = True

    def setup(self) -> None:
        """Place the player, enemies, pickups, weaklings, goal, background and HUD."""
        self.objects = []
        self.particle_systems = []
        self.closed = False

        player = PlayerGameObject((0.0, 0.0, 0.0), self.sprite, SPRITE_SHADER, Texture.JEEP,
                                  (1.5, 1.0), 0.4, self.pointer)
        self._own(player)
        player.invincibility_timer = Timer(self._clock)
        player.set_rotation(HALF_PI)
        self.objects.append(player)

        for position in ((-5.0, 5.0, 0.0), (5.0, -4.5, 0.0)):
            kamikaze = KamikazeEnemyObject(position, self.sprite, SPRITE_SHADER, Texture.KAMIKAZE,
                                           (1.0, 1.0), 0.4, self._rng, self._clock)
            kamikaze.set_rotation(HALF_PI)
            self.objects.append(kamikaze)

        for _ in range(90):
            roll = self._rng.randrange(10)
            kind = 0 if roll == 0 else (1 if roll <= 5 else 2)
            x = float(self._rng.randrange(34) - 17)
            y = float(self._rng.randrange(34) - 17)
            collectible = CollectibleGameObject((x, y, 0.0), self.sprite, SPRITE_SHADER,
                                                Texture(kind + Texture.HEALTH), (1.0, 1.0),
                                                kind, 0.3)
            self._own(collectible).set_rotation(HALF_PI)
            self.objects.append(collectible)

        end_goal = EndGoalObject((0.0, 54.0, 0.0), self.sprite, SPRITE_SHADER, Texture.BOAT,
                                 (3.5, 3.5), 3.0)
        self._own(end_goal)
        self.end_goal = end_goal
        self.objects.append(end_goal)

        for _ in range(5):
            x = float(self._rng.randrange(24) - 12)
            y = float(self._rng.randrange(6) + 3)
            weakling = WeaklingObject((x, y, 0.0), self.sprite, SPRITE_SHADER, Texture.WEAKLING,
                                      (1.0, 1.0), 0.5, (0.0, 68.0, 0.0))
            self._own(weakling).set_rotation(HALF_PI)
            end_goal.add_weakling(weakling)
            self.objects.append(weakling)

        background = BackgroundGameObject((12.0, 12.0, 0.0), self.sprite, SPRITE_SHADER,
                                          Texture.STARS, (1.0, 1.0))
        background.scale = (12.0, 12.0)
        self.objects.append(self._own(background))

        self.hud = HUD(SPRITE_SHADER, self.sprite, Texture.NOTHING, player)
        self.hud.add_element(DrawingGameObject((-0.9, 0.8, 0.0), self.sprite, DRAWING_SHADER,
                                               Texture.NOTHING, (0.0, 0.0)))
        for label, height in (("Bullets: ", -0.7), ("Rockets: ", -0.8)):
            counter = TextGameObject((0.0, 0.0, 0.0), self.sprite, TEXT_SHADER, Texture.TEXT)
            counter.text = label
            counter.pos = (0.6, height, 0.0)
            counter.scale = (0.5, 0.1)
            self.hud.add_element(counter)

        self.spawn_timer = Timer(self._clock)
        self.spawn_timer.start(SPAWN_INTERVAL)

    def handle_controls(self, delta_time: float, controls: Controls) -> None:
        """Apply one frame of player input."""
        player = self.player
        angle = player.rotation
        speed = delta_time * 1200.0
        angle_increment = (math.pi / 1800.0) * speed
        if player.dying:
            return
        if controls.forward:
            player.update_velocity(0)
        if controls.backward:
            player.update_velocity(1)
        turn = angle_increment * min(player.velocity, 1.0)
        if controls.turn_right:
            player.set_rotation(angle - turn)
        if controls.turn_left:
            player.set_rotation(angle + turn)
        gun = player.component(1)
        if controls.select_bullets:
            gun.set_mode(GunMode.BULLET)
        if controls.select_missiles:
            gun.set_mode(GunMode.MISSILE)
        if controls.fire and not gun.cooling_down() and gun.has_ammo():
            if gun.mode == GunMode.BULLET:
                shot = self._projectile(BulletProjectile, gun, Texture.BULLET, (0.2, 0.2),
                                        8.0, 0.1)
            else:
                shot = self._projectile(MissileProjectile, gun, Texture.MISSILE, (0.8, 0.5),
                                        5.0, 0.2)
            self.objects.insert(1, shot)
            player.shoot_projectile()
        if controls.quit:
            self.closed = True

    def _projectile(self, cls, shooter, texture, scale, speed, radius):
        shot = cls(shooter.position, shooter.bearing(), self.sprite, SPRITE_SHADER, texture,
                   scale, speed, 1, 5.0, radius)
        self._own(shot).timer.start(5.0)
        return shot

    def update(self, delta_time: float) -> None:
        """Advance every object by one frame and resolve their interactions."""
        if self.spawn_timer.finished() or not self.spawn_timer.is_running():
            self.spawn_object()
        player = self.player
        i = 0
        while i < len(self.objects):
            if self._update_object(i, player, delta_time):
                return
            i += 1
        self.particle_systems = [p for p in self.particle_systems if not p.timer.finished()]
        self.hud.update(delta_time)

    def _update_object(self, i: int, player: PlayerGameObject, delta_time: float) -> bool:
        """Update the object at ``i``; return True if the frame must stop."""
        current = self.objects[i]
        if current.dying:
            if current.timer.finished():
                if current is player:
                    self._close("Game over")
                    return True
                if isinstance(current, KamikazeEnemyObject):
                    self.objects.insert(i + 1, self._explode(current.position))
                self.objects.remove(current)
                return False
            if current is player:
                return True

        current.update(delta_time)
        if isinstance(current, ProjectileGameObject) and current.timer.finished():
            self.objects.remove(current)
            return False
        if (isinstance(current, RangedEnemyObject) and not current.dying
                and current.in_range(player.position)):
            current.update_player_pos(player.position)
            self._ranged_fire(current)

        j = i + 1
        while j < len(self.objects) - BACKGROUND_OBJECTS:
            flow = self._interact(current, self.objects[j], player)
            if flow is _Flow.STOP:
                return True
            if flow is _Flow.BREAK:
                break
            j += 1
        return False

    def _interact(self, current, other, player) -> _Flow:
        if (isinstance(current, KamikazeEnemyObject) and not current.dying
                and (isinstance(other, WeaklingObject) or other is player)):
            if current.in_range(other.position):
                current.die()

        if current is player:
            self._player_contact(player, other)
            return _Flow.CONTINUE
        if (isinstance(current, RangedEnemyObject) and isinstance(other, WeaklingObject)
                and current.in_range(other.position)):
            current.update_player_pos(other.position)
            self._ranged_fire(current)
            return _Flow.CONTINUE
        if isinstance(current, ProjectileGameObject) and not isinstance(current, EnemyProjectileObject):
            if isinstance(other, EnemyGameObject) and current.collide(other) and not other.dying:
                self._projectile_hit(current, other)
                return _Flow.BREAK
            return _Flow.CONTINUE
        if isinstance(current, EnemyProjectileObject):
            if current.collide(player) and not player.dying:
                player.hurt()
                self.objects.remove(current)
                return _Flow.BREAK
            if isinstance(other, WeaklingObject) and current.collide(other) and not other.dying:
                other.hurt()
                self.objects.remove(current)
                return _Flow.BREAK
            return _Flow.CONTINUE
        if (isinstance(current, Explosion)
                and isinstance(other, (EnemyGameObject, WeaklingObject))
                and not isinstance(other, Explosion)
                and not current.is_damaged(other)):
            self._blast(current, other)
            return _Flow.CONTINUE
        if (isinstance(other, WeaklingObject) and isinstance(current, EndGoalObject)
                and current.collide(other) and not other.dying):
            self.messages.append("Weakling reached end goal")
            other.reach_end()
            current.add_weakling(other)
            outcome = current.check_end_goal()
            if outcome == Outcome.WIN:
                self._close("You win!")
                return _Flow.STOP
            if outcome == Outcome.LOSE:
                self._close("You lose!")
                return _Flow.STOP
        return _Flow.CONTINUE

    def _player_contact(self, player: PlayerGameObject, other: GameObject) -> None:
        if isinstance(other, Collider) and player.collide(other):
            if not other.dying and player.prev_collider is not other:
                if isinstance(other, CollectibleGameObject) and not other.ghost:
                    player.collect(other.kind)
                    self.objects.remove(other)
                elif not player.dying and isinstance(other, EnemyGameObject):
                    player.prev_collider = other
                    other.hurt()
                    if not player.is_invincible():
                        player.hurt()
        elif isinstance(other, EnemyGameObject):
            other.update_player_pos(player.position)
        elif other is player.prev_collider:
            player.prev_collider = None

    def _ranged_fire(self, enemy: RangedEnemyObject) -> None:
        if enemy.shoot_timer.finished():
            self.objects.insert(1, self._projectile(EnemyProjectileObject, enemy, Texture.BULLET,
                                                    (0.2, 0.2), 8.0, 0.1))
            enemy.shoot_timer.start(ENEMY_SHOOT_INTERVAL)

    def _explode(self, position) -> Explosion:
        explosion = Explosion(position, self.sprite, SPRITE_SHADER, Texture.NOTHING, (1.0, 1.0),
                              EXPLOSION_DAMAGE, EXPLOSION_RADIUS)
        self._own(explosion)
        particles = ParticleSystem((-0.5, 0.0, 0.0), self.particles, EXPLOSION_SHADER,
                                   Texture.ORB, explosion, self._clock)
        particles.scale = (0.2, 0.2)
        particles.set_rotation(-HALF_PI)
        self.particle_systems.append(particles)
        explosion.timer.start(EFFECT_DURATION)
        particles.timer.start(EFFECT_DURATION)
        return explosion

    def _projectile_hit(self, projectile: ProjectileGameObject, enemy: EnemyGameObject) -> None:
        if isinstance(projectile, BulletProjectile):
            enemy.hurt()
            blood = Blood(projectile.position, self.sprite, SPRITE_SHADER)
            self._own(blood).timer.start(BLOOD_DURATION)
            blood.set_rotation(projectile.rotation + math.pi)
            self.objects.insert(1, blood)
            particles = ParticleSystem((-0.5, 0.0, 0.0), self.blood_particles, EXPLOSION_SHADER,
                                       Texture.SQUARE, blood, self._clock)
            particles.scale = (0.05, 0.05)
            particles.set_rotation(-HALF_PI)
            self.particle_systems.append(particles)
            particles.timer.start(EFFECT_DURATION)
            self.objects.remove(projectile)
        elif isinstance(projectile, MissileProjectile):
            self.objects.insert(1, self._explode(projectile.position))
            self.objects.remove(projectile)

    @staticmethod
    def _blast(explosion: Explosion, other: GameObject) -> None:
        distance = float(np.linalg.norm(explosion.position - other.position))
        if distance <= explosion.radius:
            explosion.add_affected(other)
            for _ in range(math.ceil(explosion.damage_at(distance))):
                other.hurt()
                if other.dying:
                    break

    def spawn_object(self) -> None:
        """Add a random enemy at a random place and restart the spawn timer."""
        x = float(self._rng.randrange(30) - 15)
        y = float(self._rng.randrange(30) - 15)
        roll = self._rng.randrange(10)
        if roll == 0:
            cls, texture = KamikazeEnemyObject, Texture.KAMIKAZE
        elif roll <= 5:
            self.messages.append("spawning wanderer")
            cls, texture = WanderingEnemyObject, Texture.WANDERER
        else:
            cls, texture = RangedEnemyObject, Texture.RANGED
        enemy = cls((x, y, 0.0), self.sprite, SPRITE_SHADER, texture, (1.0, 1.0), 0.4,
                    self._rng, self._clock)
        enemy.set_rotation(HALF_PI)
        self.objects.insert(len(self.objects) - BACKGROUND_OBJECTS, enemy)
        self.spawn_timer.start(SPAWN_INTERVAL)

    def view_matrix(self, width: int, height: int) -> np.ndarray:
        """Camera matrix: keep the aspect ratio, zoom out and centre on the player."""
        if width <= 0 or height <= 0:
            raise ValueError("window size must be positive")
        if width > height:
            window_scale = np.diag([height / width, 1.0, 1.0, 1.0])
        else:
            window_scale = np.diag([1.0, width / height, 1.0, 1.0])
        zoom = np.diag([CAMERA_ZOOM, CAMERA_ZOOM, CAMERA_ZOOM, 1.0])
        return window_scale @ zoom @ _translation(-self.player.position)