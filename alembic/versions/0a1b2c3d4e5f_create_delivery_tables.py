"""create_delivery_tables

Revision ID: 0a1b2c3d4e5f
Revises:
Create Date: 2026-10-19 00:00:00.000000

배달 서비스 초기 테이블 생성: members, stores, menus, orders, login_sessions.
Create the initial delivery tables: members, stores, menus, orders, login_sessions.
"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision: str = '0a1b2c3d4e5f'
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    # members — 회원 (USER / OWNER), 탈퇴 시 status=DELETED
    op.create_table(
        'members',
        sa.Column('id', sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column('name', sa.String(100), nullable=False),
        sa.Column('email', sa.String(255), nullable=False, unique=True),
        sa.Column('password', sa.String(255), nullable=False),
        sa.Column('role', sa.String(20), nullable=False),
        sa.Column('status', sa.String(20), server_default='ACTIVE', nullable=False),
        sa.Column('created_at', sa.DateTime(timezone=True), server_default=sa.func.now()),
        sa.Column('modified_at', sa.DateTime(timezone=True), server_default=sa.func.now()),
    )

    # stores — 사장님 소유 매장
    op.create_table(
        'stores',
        sa.Column('id', sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column('owner_id', sa.Integer(), sa.ForeignKey('members.id'), nullable=False),
        sa.Column('name', sa.String(255), nullable=False),
        sa.Column('status', sa.String(20), server_default='ACTIVE', nullable=False),
        sa.Column('min_order_price', sa.Integer(), server_default='0', nullable=False),
        sa.Column('open_time', sa.String(5), nullable=True),
        sa.Column('close_time', sa.String(5), nullable=True),
        sa.Column('created_at', sa.DateTime(timezone=True), server_default=sa.func.now()),
        sa.Column('modified_at', sa.DateTime(timezone=True), server_default=sa.func.now()),
    )
    op.create_index('ix_stores_owner_id', 'stores', ['owner_id'])

    # menus — 매장 메뉴
    op.create_table(
        'menus',
        sa.Column('id', sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column('store_id', sa.Integer(), sa.ForeignKey('stores.id', ondelete='CASCADE'), nullable=False),
        sa.Column('name', sa.String(255), nullable=False),
        sa.Column('price', sa.Integer(), nullable=False),
        sa.Column('status', sa.String(20), server_default='ACTIVE', nullable=False),
        sa.Column('created_at', sa.DateTime(timezone=True), server_default=sa.func.now()),
        sa.Column('modified_at', sa.DateTime(timezone=True), server_default=sa.func.now()),
    )
    op.create_index('ix_menus_store_id', 'menus', ['store_id'])

    # orders — 주문 (메뉴 이름은 주문 시점 값으로 복사)
    # Orders; the menu name is copied at order time
    op.create_table(
        'orders',
        sa.Column('id', sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column('store_id', sa.Integer(), sa.ForeignKey('stores.id'), nullable=False),
        sa.Column('member_id', sa.Integer(), sa.ForeignKey('members.id'), nullable=False),
        sa.Column('menu_name', sa.String(255), nullable=False),
        sa.Column('status', sa.String(20), server_default='ORDERED', nullable=False),
        sa.Column('created_at', sa.DateTime(timezone=True), server_default=sa.func.now()),
        sa.Column('modified_at', sa.DateTime(timezone=True), server_default=sa.func.now()),
    )
    op.create_index('ix_orders_store_id', 'orders', ['store_id'])
    op.create_index('ix_orders_member_id', 'orders', ['member_id'])

    # login_sessions — 서버 측 로그인 세션
    # Server-side login sessions referenced by the signed cookie
    op.create_table(
        'login_sessions',
        sa.Column('id', sa.String(64), primary_key=True),
        sa.Column('email', sa.String(255), nullable=False),
        sa.Column('expires_at', sa.DateTime(timezone=True), nullable=False),
        sa.Column('created_at', sa.DateTime(timezone=True), server_default=sa.func.now()),
    )
    op.create_index('ix_login_sessions_email', 'login_sessions', ['email'])


def downgrade() -> None:
    op.drop_index('ix_login_sessions_email', table_name='login_sessions')
    op.drop_table('login_sessions')
    op.drop_index('ix_orders_member_id', table_name='orders')
    op.drop_index('ix_orders_store_id', table_name='orders')
    op.drop_table('orders')
    op.drop_index('ix_menus_store_id', table_name='menus')
    op.drop_table('menus')
    op.drop_index('ix_stores_owner_id', table_name='stores')
    op.drop_table('stores')
    op.drop_table('members')
