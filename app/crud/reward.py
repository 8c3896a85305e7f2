# app/crud/reward.py

import uuid
from typing import List

from sqlalchemy.orm import Session

from app.models.reward import Reward
from app.schemas.reward import RewardCreate


def get_rewards_by_business(db: Session, business_id: uuid.UUID) -> List[Reward]:
    return db.query(Reward).filter(
        Reward.business_id == business_id
    ).order_by(Reward.created_at.desc()).all()


def get_reward(db: Session, reward_id: uuid.UUID) -> Reward | None:
    return db.query(Reward).filter(Reward.id == reward_id).first()


def create_reward(db: Session, data: RewardCreate) -> Reward:
    reward = Reward(
        business_id=data.business_id,
        name=data.name,
        description=data.description or None,
        points_required=data.points_required,
        image_url=data.image_url or None,
        is_active=data.is_active,
        redemption_limit=data.redemption_limit,
        valid_from=data.valid_from,
        valid_until=data.valid_until,
    )
    db.add(reward)
    db.commit()
    db.refresh(reward)
    return reward
