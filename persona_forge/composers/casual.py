from persona_forge.composers.common import emoji, finish, other_friend, pet_pronouns, pet_tenure
from persona_forge.models import Persona
from persona_forge.utils.rng import SeededRandom


def compose_casual(persona: Persona, rng: SeededRandom) -> list[str]:
    pet = persona.pet
    city = persona.city
    pr = pet_pronouns(rng)
    posts: list[str] = []

    posts.append(rng.pick([
        f"{pet.name} had {pr.possessive} annual checkup today. Can't believe it's been {pet_tenure(persona)} "
        f"since I adopted {pr.object} in {pet.adoption_year}. {pet.name} is still scared of the vet every single time",
        f"Can't believe {pet.name} and I have been together for {pet_tenure(persona)}. "
        f"Got {pr.object} back in {pet.adoption_year} and it was the best decision ever",
    ]) + emoji(persona, rng, ["🐾", "❤️", "🥹"]))

    posts.append(rng.pick([
        f"Finally finished that {rng.pick(['proposal', 'project', 'report'])}. Took way longer than it should have "
        "but it's done. Now I can actually enjoy my weekend.",
        f"Survived another week of {rng.pick(['meetings', 'deadlines', 'back-to-back calls'])}. Exhausted but we made it.",
    ]))

    friend = rng.pick(persona.friends)
    posts.append(rng.pick([
        f"{friend.handle} omg I know right?? I was {rng.pick(['yelling at my TV', 'losing my mind'])} the entire time",
        f"{friend.handle} yeah I'm down for {rng.pick(['trivia', 'drinks', 'brunch'])} on "
        f"{rng.pick(['Thursday', 'Saturday', 'Sunday'])}! haven't been there in forever",
    ]))

    posts.append(
        f"The line at this coffee shop is insane. Why did I think coming here at {rng.int(8, 10)}am on a "
        f"{rng.pick(['Saturday', 'Sunday'])} was a good idea"
    )

    posts.append(rng.pick([
        f"Whoever keeps {rng.pick(['microwaving fish', 'leaving dirty dishes', 'burning the coffee'])} in the office "
        "kitchen needs to stop immediately.",
        f"Can we talk about how {rng.pick(persona.occupation.dislikes)} is the worst part of my job? Because it is.",
    ]))

    posts.append(
        f"Is it just me or has {city} been {rng.pick(['way too hot', 'freezing', 'raining nonstop'])} this week?"
        + emoji(persona, rng, ["🥵", "🥶", "🌧️"])
    )

    posts.append(
        f"{pet.name} just {rng.pick(['knocked my coffee off the table', 'stole my spot on the couch', 'barked at a leaf'])}. "
        f"Apparently {pet.name} {pet.fun_fact} now too."
    )

    posts.append(
        f"Started watching {rng.pick(['that new crime show', 'a baking competition', 'an old sitcom'])} "
        f"and now it's {rng.pick(['1am', '2am', 'midnight'])}. Zero regrets. Some regrets."
    )

    posts.append(rng.pick([
        f"Tried that new {rng.pick(['taco place', 'ramen spot', 'brunch place'])} in {city} and I'm still thinking about it.",
        f"Best part of living in {city}: {rng.pick(['the food', 'the parks', 'the people'])}. Worst part: rent.",
    ]))

    friend2 = other_friend(persona, friend)
    posts.append(
        f"{friend2.handle} {rng.pick(['happy birthday!!', 'thank you for last night', 'you were so right about that show'])}"
        + emoji(persona, rng, ["🎉", "😂", "💙"])
    )

    event = persona.recent_events[0]
    posts.append(f"Update: {event.description}. Feeling {event.emotion} about it.")

    posts.append(rng.pick([
        "Grocery shopping while hungry was a mistake. Came home with three kinds of chips and no actual food.",
        f"My sleep schedule is a mess. Went to bed at {persona.lifestyle.sleep_time} again.",
    ]))

    return finish(posts, rng)
