"""Owned-set repair.

Create and Delete write the post record and the creator's owned set
separately, so a failure between the two leaves them apart. Rebuilding
from posts.creator_id brings them back together.
"""

import uuid
from typing import List, Optional

from core.errors import ErrInternal
from ..errors import ErrUserNotFound
from ..type import ReconcileOutput
from ..repository.errors import RepositoryError
from ..repository.option import GetOneOptions


async def reconcile_owned_posts(self, email: Optional[str] = None) -> ReconcileOutput:
    """Rebuild the owned set of one user (by e-mail) or of every user."""
    output = ReconcileOutput()

    try:
        if email:
            user = await self.repository.get_one(GetOneOptions(email=email))
            if user is None:
                raise ErrUserNotFound()
            user_ids: List[uuid.UUID] = [user.id]
        else:
            user_ids = await self.repository.list_ids()

        for user_id in user_ids:
            before = set(await self.repository.list_post_ids(user_id))
            output.entries += await self.repository.reconcile_owned_posts(user_id)
            after = set(await self.repository.list_post_ids(user_id))
            output.users += 1

            if before != after:
                output.diverged.append(str(user_id))
                self.logger.warning(
                    f"internal.user.usecase.reconcile_owned_posts: user {user_id} repaired: "
                    f"{len(after - before)} added, {len(before - after)} dropped"
                )
    except RepositoryError as e:
        self.logger.error(f"internal.user.usecase.reconcile_owned_posts: {e}")
        raise ErrInternal() from e

    self.logger.info(
        f"internal.user.usecase.reconcile_owned_posts: {output.users} users, "
        f"{len(output.diverged)} repaired"
    )
    return output
