"""
卡片路由

所有接口都需要会话；归属校验在这里做，存储层不按 owner 过滤。
"""
import logging
from typing import List

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from cardbox.database import get_db
from cardbox.dependencies import Identity, get_current_identity
from cardbox.errors import NotFound, Forbidden
from cardbox.models import Card, CardCategory
from cardbox.schemas.card import CardCreate, CardUpdate, CardOut, DeckStats, MessageResponse
from cardbox.stores import CardStore

logger = logging.getLogger(__name__)

router = APIRouter()

# 类别 -> DeckStats 字段
STATS_FIELDS = {
    CardCategory.STORY.value: "stories",
    CardCategory.PROMPT.value: "prompts",
    CardCategory.NOTE.value: "notes",
    CardCategory.TEXT.value: "texts",
}


async def load_owned_card(store: CardStore, card_id: str, identity: Identity) -> Card:
    """
    取出调用者拥有的卡片

    不存在 -> 404；存在但属于他人 -> 403。
    """
    card = await store.find_by_id(card_id)
    if card is None:
        raise NotFound("Card not found")
    if card.user_id != identity.id:
        raise Forbidden("Not the owner of this card")
    return card


@router.get("", response_model=List[CardOut])
async def list_cards(
    identity: Identity = Depends(get_current_identity),
    db: AsyncSession = Depends(get_db)
):
    """我的卡片，最新在前"""
    cards = await CardStore(db).list_by_owner(identity.id)
    return [CardOut.model_validate(card) for card in cards]


@router.get("/stats", response_model=DeckStats)
async def card_stats(
    identity: Identity = Depends(get_current_identity),
    db: AsyncSession = Depends(get_db)
):
    """按类别统计我的卡片"""
    counts = await CardStore(db).count_by_category(identity.id)
    stats = DeckStats(total=sum(counts.values()))
    for category, count in counts.items():
        field = STATS_FIELDS.get(category)
        if field:
            setattr(stats, field, count)
    return stats


@router.post("", response_model=CardOut)
async def create_card(
    req: CardCreate,
    identity: Identity = Depends(get_current_identity),
    db: AsyncSession = Depends(get_db)
):
    """创建卡片，owner 为当前调用者"""
    card = Card(
        user_id=identity.id,
        title=req.title,
        category=req.category.value,
        content=req.content,
        tags=req.tags,
    )
    card = await CardStore(db).insert(card)
    logger.info("Card %s created by %s", card.id, identity.id)
    return CardOut.model_validate(card)


@router.get("/{card_id}", response_model=CardOut)
async def get_card(
    card_id: str,
    identity: Identity = Depends(get_current_identity),
    db: AsyncSession = Depends(get_db)
):
    """单张卡片"""
    card = await load_owned_card(CardStore(db), card_id, identity)
    return CardOut.model_validate(card)


@router.put("/{card_id}", response_model=CardOut)
async def update_card(
    card_id: str,
    req: CardUpdate,
    identity: Identity = Depends(get_current_identity),
    db: AsyncSession = Depends(get_db)
):
    """部分更新卡片"""
    store = CardStore(db)
    await load_owned_card(store, card_id, identity)
    card = await store.update(card_id, req.changes())
    if card is None:
        # 校验后被并发删除
        raise NotFound("Card not found")
    logger.info("Card %s updated by %s", card_id, identity.id)
    return CardOut.model_validate(card)


@router.delete("/{card_id}", response_model=MessageResponse)
async def delete_card(
    card_id: str,
    identity: Identity = Depends(get_current_identity),
    db: AsyncSession = Depends(get_db)
):
    """永久删除卡片"""
    store = CardStore(db)
    await load_owned_card(store, card_id, identity)
    if not await store.delete(card_id):
        raise NotFound("Card not found")
    logger.info("Card %s deleted by %s", card_id, identity.id)
    return {"message": "Deleted successfully"}
