import uuid

import django.core.validators
import django.db.models.deletion
from django.conf import settings
from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = [
        ('products', '0001_initial'),
        migrations.swappable_dependency(settings.AUTH_USER_MODEL),
    ]

    operations = [
        migrations.CreateModel(
            name='CartModel',
            fields=[
                ('id', models.UUIDField(default=uuid.uuid4, editable=False, primary_key=True, serialize=False)),
                ('created_at', models.DateTimeField(auto_now_add=True, verbose_name='생성시각')),
                ('updated_at', models.DateTimeField(auto_now=True, verbose_name='수정시각')),
                ('user', models.OneToOneField(on_delete=django.db.models.deletion.CASCADE, related_name='cart', to=settings.AUTH_USER_MODEL, verbose_name='회원')),
            ],
            options={
                'verbose_name': 'Cart',
                'verbose_name_plural': 'Carts',
                'db_table': 'carts',
            },
        ),
        migrations.CreateModel(
            name='CartItemModel',
            fields=[
                ('id', models.UUIDField(default=uuid.uuid4, editable=False, primary_key=True, serialize=False)),
                ('quantity', models.PositiveIntegerField(default=1, validators=[django.core.validators.MinValueValidator(1)], verbose_name='수량')),
                ('added_at', models.DateTimeField(auto_now_add=True, verbose_name='담은 시각')),
                ('cart', models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name='items', to='orders.cartmodel', verbose_name='장바구니')),
                ('product', models.ForeignKey(null=True, on_delete=django.db.models.deletion.SET_NULL, related_name='cart_items', to='products.productmodel', verbose_name='상품')),
            ],
            options={
                'verbose_name': 'Cart Item',
                'verbose_name_plural': 'Cart Items',
                'db_table': 'cart_items',
                'ordering': ['added_at'],
                'unique_together': {('cart', 'product')},
            },
        ),
        migrations.CreateModel(
            name='OrderModel',
            fields=[
                ('id', models.UUIDField(default=uuid.uuid4, editable=False, primary_key=True, serialize=False)),
                ('order_number', models.CharField(db_index=True, max_length=50, unique=True, verbose_name='주문번호')),
                ('total_amount', models.DecimalField(decimal_places=2, max_digits=12, validators=[django.core.validators.MinValueValidator(0)], verbose_name='최종 결제 금액')),
                ('shipping_fee', models.DecimalField(decimal_places=2, default=0, max_digits=12, validators=[django.core.validators.MinValueValidator(0)], verbose_name='배송비')),
                ('discount_amount', models.DecimalField(decimal_places=2, default=0, max_digits=12, validators=[django.core.validators.MinValueValidator(0)], verbose_name='할인 금액')),
                ('coupon_code', models.CharField(blank=True, max_length=50, verbose_name='쿠폰 코드')),
                ('status', models.CharField(choices=[('pending', '주문 접수'), ('processing', '처리 중'), ('shipped', '배송 중'), ('delivered', '배송 완료'), ('cancelled', '주문 취소')], db_index=True, default='pending', max_length=20, verbose_name='주문 상태')),
                ('recipient_name', models.CharField(max_length=100, verbose_name='수령인')),
                ('phone_number', models.CharField(max_length=20, verbose_name='연락처')),
                ('address', models.CharField(max_length=255, verbose_name='주소')),
                ('address_detail', models.CharField(blank=True, max_length=255, verbose_name='상세 주소')),
                ('postal_code', models.CharField(blank=True, max_length=10, verbose_name='우편번호')),
                ('payment_method', models.CharField(choices=[('card', '카드'), ('bank', '계좌이체'), ('cash', '현금'), ('other', '기타')], default='card', max_length=20, verbose_name='결제 수단')),
                ('payment_status', models.CharField(choices=[('pending', '결제 대기'), ('completed', '결제 완료'), ('failed', '결제 실패'), ('refunded', '환불 완료')], default='pending', max_length=20, verbose_name='결제 상태')),
                ('tracking_number', models.CharField(blank=True, max_length=100, verbose_name='운송장 번호')),
                ('delivery_request', models.TextField(blank=True, verbose_name='배송 요청사항')),
                ('cancellation_reason', models.TextField(blank=True, verbose_name='취소 사유')),
                ('refund_amount', models.DecimalField(blank=True, decimal_places=2, max_digits=12, null=True, validators=[django.core.validators.MinValueValidator(0)], verbose_name='환불 금액')),
                ('refund_date', models.DateTimeField(blank=True, null=True, verbose_name='환불 일시')),
                ('notes', models.TextField(blank=True, verbose_name='메모')),
                ('created_at', models.DateTimeField(auto_now_add=True, db_index=True, verbose_name='생성시각')),
                ('updated_at', models.DateTimeField(auto_now=True, verbose_name='수정시각')),
                ('user', models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name='orders', to=settings.AUTH_USER_MODEL, verbose_name='회원')),
            ],
            options={
                'verbose_name': 'Order',
                'verbose_name_plural': 'Orders',
                'db_table': 'orders',
                'ordering': ['-created_at'],
                'indexes': [
                    models.Index(fields=['user', '-created_at'], name='orders_user_created_idx'),
                    models.Index(fields=['status', '-created_at'], name='orders_status_created_idx'),
                ],
            },
        ),
        migrations.CreateModel(
            name='OrderItemModel',
            fields=[
                ('id', models.UUIDField(default=uuid.uuid4, editable=False, primary_key=True, serialize=False)),
                ('line_number', models.PositiveSmallIntegerField(default=0, verbose_name='순번')),
                ('product_id', models.UUIDField(verbose_name='상품번호')),
                ('sku', models.CharField(max_length=50, verbose_name='SKU')),
                ('name', models.CharField(max_length=200, verbose_name='상품명')),
                ('quantity', models.PositiveIntegerField(validators=[django.core.validators.MinValueValidator(1)], verbose_name='수량')),
                ('price', models.DecimalField(decimal_places=2, max_digits=12, validators=[django.core.validators.MinValueValidator(0)], verbose_name='주문 시점 가격')),
                ('image', models.CharField(blank=True, max_length=500, verbose_name='대표 이미지')),
                ('order', models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name='items', to='orders.ordermodel', verbose_name='주문')),
            ],
            options={
                'verbose_name': 'Order Item',
                'verbose_name_plural': 'Order Items',
                'db_table': 'order_items',
                'ordering': ['line_number'],
            },
        ),
    ]
